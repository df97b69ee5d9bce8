"""Sort distinct integers with two stacks and print the push_swap operations used."""

__version__ = "1.0.0"