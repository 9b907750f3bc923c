"""
# maryhdr: the header of the MARY data files.

All the binary resources used by the MARY speech synthesizer (decision trees,
unit inventories, feature files, join costs, timelines) begin with the same
header that identifies the family of the file, the version of the format
and the kind of payload that follows.

The header is described declaratively as a Chunk of fields (see core and
fields) and two basic main operations are defined for it:

 1. unpack(): read the binary data and build the high-level representation.
    Reading starts at the actual offset of the stream and the chunk itself
    knows how many bytes needs to read.

 2. pack(): encode the high-level representation into binary data.

Validation is a separate, explicit step: a header read from a stream is only
checked when asked (validate()), or when loaded through the strict
MaryHeader.from_source().
"""
