# utils – Payload-Codec Hilfsmodule
