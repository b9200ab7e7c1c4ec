"""
API layer for userhub.

Exposes the GraphQL endpoint (getUsers, addUser, updateUser, deleteUser).
"""
