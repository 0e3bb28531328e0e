"""nicephrase command line"""
