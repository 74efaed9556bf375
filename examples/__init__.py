"""Example inputs for the cfrac verification scripts."""
