class Error(Exception): pass

class OracleEncodingFailure(Error):
    def __init__(self, encoding: str, data: bytes, reason: str = ""):
        self.encoding = encoding
        self.data = bytes(data)
        msg = f"{encoding}: cannot encode {len(self.data)}-byte input"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)

class SerializationFailure(Error): pass
