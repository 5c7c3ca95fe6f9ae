"""demo-service: GraphQL teaching API over in-memory users and movies."""

__version__ = "1.0.0"
