from .errors import MalformedLineError

def import_text(env, stream):
    """
    Import "key=value" lines into env, like the input file of mkenvimage.

    Empty lines and lines starting with '#' are ignored. Assignments go
    through env.set, so "key=" removes key. A line without '=', with an
    empty key, with a NUL byte or with invalid UTF-8 stops the import;
    lines before it stay applied.
    """
    for lineno, line in enumerate(stream, 1):
        if isinstance(line, bytes):
            try:
                line = line.decode('utf-8')
            except UnicodeDecodeError:
                raise MalformedLineError(line.rstrip(b'\r\n'), lineno)
        line = line.rstrip('\r\n')
        if not line or line.startswith('#'):
            continue
        key, sep, value = line.partition('=')
        if not sep or not key or '\0' in line:
            raise MalformedLineError(line, lineno)
        env.set(key, value)
