"""TypeScript declaration generation for parsed code sections.

Submodules:
  naming  -- section id -> type name derivation
  tree    -- declaration tree (type aliases whose nodes carry their own comments)
  style   -- StyleConfig model and `.prettierrc` loader
  render  -- prettier-style TypeScript rendering
"""
