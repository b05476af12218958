"""Terminal front end for seemore."""
