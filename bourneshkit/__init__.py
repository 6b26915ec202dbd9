"""Building blocks of a classic Bourne shell: pattern matching, file name generation, getopt, echo, character classes, command hashing and command trees."""

__version__ = "0.1.0"