# =============================================================================
# Spam Classifier Tests
# =============================================================================

import pytest

from spam_detect.core import LabeledEmail
from spam_detect.spam import SPAM_INDICATORS, ClassifierStats, SpamClassifier


class TestIndicators:
    def test_indicator_set_is_fixed(self):
        assert SPAM_INDICATORS == (
            "free", "win", "urgent", "lottery", "click here",
            "limited offer", "$$$", "winner", "prize", "congratulations",
        )

    def test_every_occurrence_counts(self, classifier):
        assert classifier.count_indicators("free free free") == 3

    def test_punctuated_words_do_not_match(self, classifier):
        assert classifier.count_indicators("free! win. prize?") == 0

    def test_dollar_signs_match_exactly(self, classifier):
        assert classifier.count_indicators("$$$ $$$$ $$") == 1


class TestPredict:
    def test_ascii_separator_does_not_split_indicators(self, classifier):
        assert classifier.count_indicators("free\x1fwin\x1furgent") == 0
        assert classifier.predict("free\x1fwin\x1furgent") is False

    def test_four_indicators_is_spam(self, classifier):
        assert classifier.predict("FREE WIN URGENT LOTTERY") is True

    def test_two_indicators_is_not_spam(self, classifier):
        assert classifier.predict("free win") is False

    def test_punctuation_hides_an_indicator(self, classifier):
        assert classifier.predict("you are a winner, claim prize $$$ now") is False

    def test_three_indicators_is_spam(self, classifier):
        assert classifier.predict("you are a winner claim prize $$$ now") is True

    def test_multi_word_indicators_never_match(self, classifier):
        message = "click here for your limited offer"
        assert classifier.count_indicators(message) == 0
        assert classifier.predict(message) is False

    def test_multi_word_indicators_do_not_add_to_score(self, classifier):
        assert classifier.predict("click here limited offer click here free win") is False

    def test_empty_message_is_not_spam(self, classifier):
        assert classifier.predict("") is False

    @pytest.mark.parametrize("word", ["FREE", "Free", "free", "fReE"])
    def test_case_insensitive(self, classifier, word):
        assert classifier.count_indicators(word) == 1
        assert classifier.predict(f"{word} {word} {word}") is True

    @pytest.mark.parametrize("words", [
        ("free", "win", "urgent"),
        ("lottery", "$$$", "winner"),
        ("prize", "congratulations", "free"),
        ("WIN", "Prize", "LOTTERY", "Urgent"),
    ])
    def test_three_or_more_distinct_indicators_is_spam(self, classifier, words):
        assert classifier.predict("hello " + " there ".join(words)) is True

    def test_fixture_spam_message(self, classifier, spam_message):
        assert classifier.predict(spam_message) is True

    def test_custom_threshold(self):
        strict = SpamClassifier(threshold=0)
        assert strict.predict("free") is True
        assert strict.predict("nothing here") is False


class TestTraining:
    def test_train_accumulates_per_class(self, classifier, sample_emails):
        classifier.train(sample_emails)

        assert classifier.spam_count == 2
        assert classifier.ham_count == 3
        assert classifier.spam_words == [
            "win", "a", "free", "cruise!!!", "claim", "your", "prize",
            "urgent", "lottery", "winner",
        ]
        assert classifier.ham_words == [
            "lunch", "at", "noon?",
            "capitalised", "label", "counts", "as", "ham",
        ]

    def test_unknown_labels_are_ham(self, classifier):
        classifier.train([LabeledEmail(label="junk", content="x"), LabeledEmail(label="", content="y")])
        assert classifier.spam_count == 0
        assert classifier.ham_count == 2

    def test_train_is_cumulative(self, classifier, sample_emails):
        classifier.train(sample_emails)
        classifier.train(sample_emails)
        assert classifier.spam_count == 4
        assert classifier.ham_count == 6

    def test_stats(self, classifier, sample_emails):
        assert classifier.stats == ClassifierStats()

        classifier.train(sample_emails)
        stats = classifier.stats
        assert stats.spam_count == 2
        assert stats.ham_count == 3
        assert stats.spam_token_count == 10
        assert stats.ham_token_count == 8
        assert stats.vocabulary_size == 18

    def test_reset(self, classifier, sample_emails):
        classifier.train(sample_emails)
        classifier.reset()
        assert classifier.stats == ClassifierStats()
        assert classifier.spam_words == []

    def test_prediction_ignores_training(self, sample_emails):
        messages = [
            "FREE WIN URGENT LOTTERY",
            "free win",
            "click here for your limited offer",
            "",
            "lunch at noon?",
            "win a free cruise!!! claim your prize",
        ]
        untrained = SpamClassifier()
        trained = SpamClassifier()
        trained.train(sample_emails * 10)

        assert [trained.predict(m) for m in messages] == [untrained.predict(m) for m in messages]
