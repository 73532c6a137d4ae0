"""Report git status for a parent repository and its declared submodules."""
