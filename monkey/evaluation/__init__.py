"""Tree-walking evaluation of Monkey ASTs."""
