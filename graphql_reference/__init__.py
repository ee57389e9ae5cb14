"""
Static GraphQL schema reference pages for Django projects.
"""
