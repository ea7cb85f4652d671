"""
Entity store layer.

Repositories hide how records are persisted.  Services depend on the
abstract interfaces defined here, so the backing store (SQLite file or
process memory) can be swapped without touching business logic.
"""
