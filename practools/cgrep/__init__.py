"""Recursive regular-expression search over a directory tree."""