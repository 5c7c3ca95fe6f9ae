"""GraphQL schema, resolver and DataLoader tests."""
