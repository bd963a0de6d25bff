from __future__ import annotations
import enum


class ErrorCategory(str, enum.Enum):
    NONE = "none"
    GENERIC_SPELLING = "generic_spelling"
    MISSING_DIACRITIC = "missing_diacritic"
    OMISSION = "omission"

    # first letter
    DELETION_START = "deletion_start"
    INSERTION_START = "insertion_start"
    SUBSTITUTION_START = "substitution_start"
    IRREGULAR_INITIAL_H = "irregular_initial_h"
    CONTEXTUAL_SC_START = "contextual_sc_start"

    # last letter
    DELETION_END = "deletion_end"
    INSERTION_END = "insertion_end"
    SUBSTITUTION_END = "substitution_end"
    INVERSION_END = "inversion_end"
    SPURIOUS_FINAL_H = "spurious_final_h"
    CONFUSION_SZ = "confusion_s_z"
    CONFUSION_SSS = "confusion_s_ss"
    CONFUSION_SC = "confusion_s_c"
    CONFUSION_SX = "confusion_s_x"


# category -> (long, short)
DESCRIPTIONS: dict[ErrorCategory, tuple[str, str]] = {
    ErrorCategory.NONE: ("Nenhum erro", "OK"),
    ErrorCategory.GENERIC_SPELLING: ("Erro ortográfico", "Ortografia"),
    ErrorCategory.MISSING_DIACRITIC: ("Erro de acentuação", "Acentuação"),
    ErrorCategory.OMISSION: ("Omissão de letra(s)", "Omissão"),
    ErrorCategory.DELETION_START: ("Supressão da PRIMEIRA letra", "Supressão (início)"),
    ErrorCategory.INSERTION_START: ("Acréscimo de letra INICIAL", "Acréscimo (início)"),
    ErrorCategory.SUBSTITUTION_START: ("Troca da PRIMEIRA letra", "Troca (início)"),
    ErrorCategory.IRREGULAR_INITIAL_H: ("Irregularidade (H INICIAL)", "H inicial"),
    ErrorCategory.CONTEXTUAL_SC_START: (
        "Erro contextual (S/C INICIAL antes de E/I)",
        "S/C inicial",
    ),
    ErrorCategory.DELETION_END: ("Supressão da ÚLTIMA letra", "Supressão (fim)"),
    ErrorCategory.INSERTION_END: ("Acréscimo de letra FINAL", "Acréscimo (fim)"),
    ErrorCategory.SUBSTITUTION_END: ("Troca da ÚLTIMA letra", "Troca (fim)"),
    ErrorCategory.INVERSION_END: ("Inversão das duas ÚLTIMAS letras", "Inversão (fim)"),
    ErrorCategory.SPURIOUS_FINAL_H: ("Uso indevido de H FINAL", "H final indevido"),
    ErrorCategory.CONFUSION_SZ: ("Confusão entre S e Z FINAL", "S/Z"),
    ErrorCategory.CONFUSION_SSS: ("Confusão entre S e SS FINAL", "S/SS"),
    ErrorCategory.CONFUSION_SC: ("Confusão entre S e Ç FINAL", "S/Ç"),
    ErrorCategory.CONFUSION_SX: ("Confusão entre S e X FINAL", "S/X"),
}

_UNKNOWN = ("Erro desconhecido", "Desconhecido")


def category_from_value(value: str | ErrorCategory | None) -> ErrorCategory | None:
    if value is None or value == "":
        return None
    try:
        return ErrorCategory(value)
    except ValueError:
        return None


def describe(category: ErrorCategory | str | None) -> str:
    return DESCRIPTIONS.get(category_from_value(category), _UNKNOWN)[0]


def describe_short(category: ErrorCategory | str | None) -> str:
    return DESCRIPTIONS.get(category_from_value(category), _UNKNOWN)[1]
