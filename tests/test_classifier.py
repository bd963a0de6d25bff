import pytest
from dictation.classifier import Classification, classify
from dictation.errors import ErrorCategory as E


def _category(expected, submitted):
    result = classify(expected, submitted)
    assert result.is_correct is False
    return result.category


@pytest.mark.parametrize("word", ["gato", "Árvore", "ação", "guarda-chuva", "a"])
def test_same_word_is_correct(word):
    assert classify(word, word) == Classification(True, None)


@pytest.mark.parametrize(
    "expected, submitted",
    [("Gato", "gato"), ("gato", "  GATO "), ("Brasília", "brasília")],
)
def test_case_and_surrounding_spaces_are_ignored(expected, submitted):
    assert classify(expected, submitted).is_correct is True


@pytest.mark.parametrize("submitted", ["", "   ", "\t"])
@pytest.mark.parametrize("expected", ["gato", "sol", "a", "homem"])
def test_empty_answer_is_omission(expected, submitted):
    assert classify(expected, submitted) == Classification(False, E.OMISSION)


def test_classification_is_repeatable():
    assert classify("cachorro", "cachoro") == classify("cachorro", "cachoro")


@pytest.mark.parametrize(
    "expected, submitted, category",
    [
        # last letter
        ("gato", "gat", E.DELETION_END),
        ("casa", "cas", E.DELETION_END),
        ("solo", "sol", E.DELETION_END),
        ("casa", "casaa", E.INSERTION_END),
        ("gato", "gatoo", E.INSERTION_END),
        ("sol", "soll", E.INSERTION_END),
        ("casa", "casal", E.INSERTION_END),
        ("bola", "boal", E.INVERSION_END),
        ("bom", "bon", E.SUBSTITUTION_END),
        ("solo", "sola", E.SUBSTITUTION_END),
        ("teste", "testi", E.SUBSTITUTION_END),
        ("alô", "aloh", E.SPURIOUS_FINAL_H),
        ("paz", "pas", E.CONFUSION_SZ),
        ("feliz", "felis", E.CONFUSION_SZ),
        ("vos", "voz", E.CONFUSION_SZ),
        ("três", "tress", E.CONFUSION_SSS),
        ("tórax", "tóras", E.CONFUSION_SX),
        ("flux", "flus", E.CONFUSION_SX),
        ("toras", "torax", E.CONFUSION_SX),
        ("voraç", "voras", E.CONFUSION_SC),
        ("voras", "voraç", E.CONFUSION_SC),
        # first letter
        ("teste", "deste", E.SUBSTITUTION_START),
        ("casa", "pasa", E.SUBSTITUTION_START),
        ("gato", "mato", E.SUBSTITUTION_START),
        ("teste", "este", E.DELETION_START),
        ("casa", "asa", E.DELETION_START),
        ("gato", "ato", E.DELETION_START),
        ("teste", "oteste", E.INSERTION_START),
        ("casa", "acasa", E.INSERTION_START),
        ("gato", "xgato", E.INSERTION_START),
        ("homem", "omem", E.IRREGULAR_INITIAL_H),
        ("hora", "ora", E.IRREGULAR_INITIAL_H),
        ("ontem", "hontem", E.IRREGULAR_INITIAL_H),
        ("hontem", "ontem", E.IRREGULAR_INITIAL_H),
        ("signo", "cigno", E.CONTEXTUAL_SC_START),
        ("cigarro", "sigarro", E.CONTEXTUAL_SC_START),
        ("serto", "certo", E.CONTEXTUAL_SC_START),
        # whole word
        ("árvore", "arvore", E.MISSING_DIACRITIC),
        ("café", "cafe", E.MISSING_DIACRITIC),
        ("mês", "mes", E.MISSING_DIACRITIC),
        ("cachorro", "cachoro", E.GENERIC_SPELLING),
        ("porque", "porqe", E.GENERIC_SPELLING),
        ("gato", "gota", E.GENERIC_SPELLING),
        ("janela", "xyzw", E.OMISSION),
        ("borboleta", "bo", E.OMISSION),
    ],
)
def test_error_categories(expected, submitted, category):
    assert _category(expected, submitted) == category


def test_last_letter_rules_take_priority():
    # "ooo" is "oooo" without its first letter and without its last letter
    assert _category("oooo", "ooo") == E.DELETION_END
    assert _category("ooo", "oooo") == E.INSERTION_END
    # wrong at both ends matches neither single-position rule
    assert _category("teste", "pesti") == E.GENERIC_SPELLING


def test_final_h_checked_before_generic_insertion():
    assert _category("alo", "aloh") == E.SPURIOUS_FINAL_H
    assert _category("alo", "aloo") == E.INSERTION_END


def test_short_words_skip_last_letter_rules():
    # "já" has two letters, so no final-h rule; falls through to fuzzy matching
    assert _category("já", "jah") == E.GENERIC_SPELLING
    assert _category("lã", "lam") == E.GENERIC_SPELLING


def test_edge_rules_use_unaccented_letters():
    # accent error plus a dropped final letter is reported as the deletion
    assert _category("café", "caf") == E.DELETION_END
    assert _category("avó", "avôs") == E.INSERTION_END


@pytest.mark.parametrize(
    "expected, submitted",
    [("enjoo", "enjôo"), ("vôo", "voo"), ("pee", "peé")],
)
def test_repeated_final_letters_count_as_inversion(expected, submitted):
    assert _category(expected, submitted) == E.INVERSION_END


def test_whitespace_only_answer_is_omission():
    assert _category("gato", "   ") == E.OMISSION


def test_fuzzy_fallback_counts_distinct_shared_letters():
    # 5 distinct shared letters / 7 letters in the shorter word = 0.71
    assert _category("abacaxi", "abacaxizz") == E.GENERIC_SPELLING
    # 3 distinct shared letters / 6 letters = 0.5
    assert _category("banana", "bananada") == E.OMISSION
    # length gap above 2
    assert _category("casa", "casarão") == E.OMISSION


def test_description_of_result():
    assert classify("gato", "gato").description is None
    assert classify("gato", "").description == "Omissão de letra(s)"
