# CLI module
# Directory traversal, worker scheduling and terminal output
