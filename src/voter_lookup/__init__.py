"""Voter lookup: electoral roll search by name or voter ID."""
