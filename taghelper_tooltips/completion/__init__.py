"""Tag helper tooltips for completion and hover."""
