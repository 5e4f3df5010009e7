"""
Pure algorithms with no domain-specific dependencies.

Modules:
    sets        - Binomial coefficient and cardinality-ordered power set
"""
