"""sptgen: error scaffold generator and helper tools for the seephit parser."""
