"""crashbridge CLI subcommands."""
