from wordriddle.config import get_word_statistics, is_well_formed_word


def test_word_statistics():
    stats = get_word_statistics(["CRANE", "ADIEU"])

    assert stats["total_words"] == 2
    assert stats["avg_vowel_count"] == 3.0
    assert stats["letter_frequency"]["A"] == 2
    assert stats["most_common_letters"][0] == ("A", 2)


def test_word_statistics_empty():
    assert get_word_statistics([]) == {"error": "Word list is empty"}


def test_is_well_formed_word():
    assert is_well_formed_word("CRANE")
    assert not is_well_formed_word("crane")
    assert not is_well_formed_word("CRANES")
    assert not is_well_formed_word(None)
