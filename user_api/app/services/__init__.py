"""
Service layer abstraction.

Each service encapsulates business logic for a domain and receives its
entity store through the constructor, so API handlers never talk to
the store directly.
"""
