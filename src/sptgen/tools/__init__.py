"""Helper tools around the parser: error filter, test skeleton, tag list."""
