"""
Core domain models, numeric kernel, and request contracts.

This package contains the stateless computational core: it holds no state
between calls and performs no I/O beyond loading its bundled JSON schemas.
"""
