"""
Service layer abstraction.

Each service encapsulates the business logic of one domain and works
on the model handles built at startup, so API handlers stay thin.
"""
