"""Core domain: levels, options, errors and interfaces."""
