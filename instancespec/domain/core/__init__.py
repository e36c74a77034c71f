"""Core domain primitives shared by all bounded contexts."""
