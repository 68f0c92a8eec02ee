"""Bloglist backend: blog CRUD, user accounts, token login and blog statistics."""
