"""Reverse the Z-340 transposition layer into the intermediate ciphertext."""
