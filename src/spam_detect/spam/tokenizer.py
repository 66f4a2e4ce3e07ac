# =============================================================================
# Message Tokenizer
# =============================================================================
# Converts message text into tokens for the spam classifier.
#
# Tokenization is deliberately plain: lowercase the text and split it on
# runs of whitespace. Punctuation stays attached to words, so "free!" and
# "free" are different tokens, and no token ever contains a space.
#
# "Whitespace" is the Unicode White_Space property. That is narrower than
# str.split(), which also breaks on the ASCII separators U+001C-U+001F.
# =============================================================================

import re


# Runs of characters that are not Unicode White_Space
TOKEN_PATTERN = re.compile(
    r"[^\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


class Tokenizer:
    """
    Splits message text into lowercase whitespace-separated tokens.

    Usage:
        >>> tokenizer = Tokenizer()
        >>> tokenizer.tokenize("  Claim your FREE prize  ")
        ['claim', 'your', 'free', 'prize']
    """

    def tokenize(self, text: str) -> list[str]:
        """
        Tokenize a piece of text.

        Args:
            text: Message text. May be empty.

        Returns:
            List of tokens. Never contains empty strings.
        """
        return TOKEN_PATTERN.findall(text.lower())
