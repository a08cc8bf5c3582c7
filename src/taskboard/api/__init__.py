"""
Request layer.

Components:
- rest.py: tasks + session over plain HTTP
- graphql.py: the same operations as named GraphQL documents
- guard.py: turns every failure into "no result" + a user notice
"""
