"""Generate TypeScript key-code union types from the UI Events code tables.

Subpackages:
  parsing       -- table extraction, row parsing, description normalization
  declarations  -- declaration tree, type naming, prettier-style rendering
"""
