"""
Service layer abstraction.

The book store keeps its records in memory for the lifetime of the
process.  Endpoints only talk to it through ``BookStore`` methods.
"""
