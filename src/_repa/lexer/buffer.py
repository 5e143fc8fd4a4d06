import re

# Everything but printable ascii is escaped in previews
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E]")


def escape_non_printable(text):
    """
    >>> escape_non_printable("a\\nb")
    'a\\\\x{000a}b'
    """
    return _NON_PRINTABLE.sub(lambda m: f"\\x{{{ord(m.group()):04x}}}", text)


class InputBuffer:
    """
    The not yet consumed part of the input. Tokens are always matched at
    the start of the buffer, consuming a token removes it from the buffer.

    The buffer is read from the stream in chunks of twice min_buffer
    characters. With min_buffer=0 the first read takes the whole stream,
    which means no token can ever be truncated by the end of the buffer.
    """

    def __init__(self, stream, min_buffer=4096, buffer_filter=None):
        """
        :param stream: A text stream, anything with a read(size) method
            returning "" at the end of data.
        :param min_buffer: The buffer is refilled when it gets shorter
            than this, 0 means read everything at once.
        :param buffer_filter: Optional function given the whole buffer after
            every read that returned data, the returned string replaces the
            buffer. Parts of the buffer are filtered again on later reads, so
            the filter has to give the same result when applied twice.
        """
        self.stream = stream
        self.min_buffer = min_buffer
        self.buffer_filter = buffer_filter
        self.text = ""
        self.consumed = 0
        self._may_grow = True

    @property
    def may_grow(self):
        """
        True until the stream has signaled end of data.
        """
        return self._may_grow

    def __len__(self):
        return len(self.text)

    def grow(self):
        """
        Append the next chunk of the stream to the buffer.

        :returns: Whether there may still be more data to come from the
            stream.
        """
        if not self._may_grow:
            return False
        if self.min_buffer == 0:
            chunk = self.stream.read()
            self._may_grow = False
        else:
            chunk = self.stream.read(self.min_buffer * 2)
            if not chunk:
                self._may_grow = False
        self.text += chunk
        if chunk and self.buffer_filter is not None:
            self.text = self.buffer_filter(self.text)
        return self._may_grow

    def refill(self):
        """
        Grow until the buffer is at least min_buffer long (non-empty for
        min_buffer=0) or the stream has ended.
        """
        while self._may_grow and len(self.text) < max(self.min_buffer, 1):
            self.grow()
        return self._may_grow

    def consume(self, length):
        """
        Remove the first length characters from the buffer.
        """
        self.text = self.text[length:]
        self.consumed += length

    def preview(self, show=20):
        """
        :param show: Number of characters to show, 0 shows the whole buffer.
        :returns: The start of the buffer with non-printable characters
            escaped as \\x{####}, for diagnostics.
        """
        text = self.text[:show] if show else self.text
        return escape_non_printable(text)
