# src/utils/text_utils.py
import re
import unicodedata


def normalize_text(s: str) -> str:
    """Remove acentos, passa para minúsculas e junta espaços repetidos.
    Ex: "  Saída  94,90 " -> "saida 94,90"
    Ex: "AMANHÃ" -> "amanha"
    """
    if not s:
        return ""

    decomposed = unicodedata.normalize("NFKD", s)
    without_accents = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return re.sub(r"\s+", " ", without_accents).strip().lower()
