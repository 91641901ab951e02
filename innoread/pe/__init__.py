"""Portable Executable headers, section tables, section readers and resource directories."""