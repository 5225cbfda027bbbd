"""Wire models of the main (root) endpoint."""
