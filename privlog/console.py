"""
Unstructured console output, the baseline privlog is compared against.

Nothing here knows about levels, categories or privacy: the message is
written as it is, secrets included.
"""


def console_print(message, file=None):
    print(message, file=file)
