# topmark:header:start
#
#   project      : MimeSniff
#   file         : __init__.py
#   file_relpath : src/mimesniff/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeSniff CLI subcommands."""
