"""Format codecs.

Each module binds one config format to the library that encodes and
decodes it. The registry maps formats to their bound codec.
"""
