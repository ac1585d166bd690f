"""Infrastructure layer: file formats and source indexing."""
