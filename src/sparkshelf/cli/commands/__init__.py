# ABOUTME: Subcommand modules for the sparkshelf CLI.
# ABOUTME: Each module defines one or more Click commands registered in sparkshelf.cli.
