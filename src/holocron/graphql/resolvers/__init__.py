"""Resolver package for the GraphQL schema.

Resolvers translate between GraphQL arguments and types and the entity store
operations in ``holocron.store``.
"""
