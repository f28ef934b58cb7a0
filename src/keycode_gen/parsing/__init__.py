"""Code-table extraction, parsing, and description normalization.

Submodules:
  patterns   -- compiled regex patterns and marker constants
  schema     -- Section / CodeEntry Pydantic models
  extract    -- split the source document into table blocks
  parse      -- turn each block into a Section
  normalize  -- decode entities and strip markup from code descriptions
"""
