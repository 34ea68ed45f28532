"""
Cross-cutting infrastructure: configuration, logging, database access,
security and the error taxonomy.
"""
