"""Subcommands of the seimei command line: search, info, filter apply and filter validate."""