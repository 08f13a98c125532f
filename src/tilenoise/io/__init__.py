"""Image serialization: PPM export/import and PNG previews."""
