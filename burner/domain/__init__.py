"""Domain layer for Burner.

Pure models and functions: the directory-encoded project record, naming
and matching rules, template value objects, and the Result monad.
"""
