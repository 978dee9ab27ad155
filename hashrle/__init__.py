from .models.run import Run
from .models.encoded_token import EncodedToken, EscapeCase
from .errors import HashRleError, MalformedEncodingError, ConfigurationError

# Convenience re-exports for direct functional use
from .tokenize.decomposer import decompose
from .tokenize.scanner import scan
from .codec.run_encoder import encode_run, encode_runs
from .codec.run_decoder import decode_token, decode_tokens
from .codec.pipeline import encode_text, decode_text
from .utils.rle import concatenate
