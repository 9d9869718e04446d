"""
Infrastructure layer for the task tracker.

This layer contains the implementation details behind the domain ports:
- Database (SQLAlchemy)
- Authentication (JWT bearer tokens, bcrypt password hashing)
- Input validation
- Web (FastAPI routers and middleware)
"""
