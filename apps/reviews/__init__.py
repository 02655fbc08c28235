"""Reviews app package.

Visitors submit reviews that start out pending; only an administrator
can approve them for public display, return them to pending, or delete
them outright. Public reads only ever see approved reviews.
"""
