"""Texture sections, vertex attribute layouts, sprite and glyph data, and window settings."""