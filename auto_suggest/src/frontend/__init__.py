"""HTTP front end for the suggest engine (Flask)."""
