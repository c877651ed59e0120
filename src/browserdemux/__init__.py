"""browserdemux entry point.

Routes a URL to a browser chosen by ordered rules in the user's config file,
then replaces the current process with that browser. See `browserdemux --help`.
"""
