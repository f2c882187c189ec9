"""PageRank on directed graphs, with the Backspace treatment of dead-end pages."""

__version__ = "0.1.0"