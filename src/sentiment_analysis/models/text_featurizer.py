# text_featurizer.py
from __future__ import annotations

from functools import partial
from typing import List, Optional, Tuple

from scipy.sparse import hstack
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.feature_extraction.text import HashingVectorizer, TfidfVectorizer
from sklearn.preprocessing import normalize
from sklearn.utils.validation import check_is_fitted

from sentiment_analysis.prepare_dataset import normalize_text


class TextFeaturizer(TransformerMixin, BaseEstimator):
    """Turns raw sentences into one sparse "Features" vector.

    Word n-grams (1, 2) and character tri-grams, term-frequency weighted,
    concatenated and L2-normalized as a whole.

    params:
      - word_ngram, char_ngram: n-gram ranges of the two extractors
      - use_hashing: HashingVectorizer instead of a fitted vocabulary
        (stateless, fixed width)
      - n_features: hashing width per extractor
      - lowercase, keep_diacritics, keep_punctuation, keep_numbers:
        options passed to normalize_text
    """

    def __init__(
        self,
        word_ngram: Tuple[int, int] = (1, 2),
        char_ngram: Tuple[int, int] = (3, 3),
        use_hashing: bool = False,
        n_features: int = 2 ** 16,
        lowercase: bool = True,
        keep_diacritics: bool = False,
        keep_punctuation: bool = True,
        keep_numbers: bool = True,
    ):
        self.word_ngram = word_ngram
        self.char_ngram = char_ngram
        self.use_hashing = use_hashing
        self.n_features = n_features
        self.lowercase = lowercase
        self.keep_diacritics = keep_diacritics
        self.keep_punctuation = keep_punctuation
        self.keep_numbers = keep_numbers

    def _preprocessor(self):
        return partial(
            normalize_text,
            lowercase=self.lowercase,
            keep_diacritics=self.keep_diacritics,
            keep_punctuation=self.keep_punctuation,
            keep_numbers=self.keep_numbers,
        )

    def _make_extractors(self):
        pre = self._preprocessor()
        if self.use_hashing:
            # 无拟合：词表由哈希决定
            tfw = HashingVectorizer(
                preprocessor=pre, ngram_range=self.word_ngram,
                n_features=self.n_features, alternate_sign=False, norm=None,
            )
            tfc = HashingVectorizer(
                preprocessor=pre, analyzer="char", ngram_range=self.char_ngram,
                n_features=self.n_features, alternate_sign=False, norm=None,
            )
        else:
            tfw = TfidfVectorizer(
                preprocessor=pre, ngram_range=self.word_ngram,
                use_idf=False, norm=None,
            )
            tfc = TfidfVectorizer(
                preprocessor=pre, analyzer="char", ngram_range=self.char_ngram,
                use_idf=False, norm=None,
            )
        return tfw, tfc

    def fit(self, texts: List[str], y=None):
        texts = _as_texts(texts)
        pre = self._preprocessor()
        if not any(pre(t) for t in texts):
            raise ValueError("Cannot fit the featurizer: every training text is empty")
        self.tfw_, self.tfc_ = self._make_extractors()
        if not self.use_hashing:
            self.tfw_.fit(texts)
            self.tfc_.fit(texts)
        return self

    def transform(self, texts: List[str]):
        check_is_fitted(self, ["tfw_", "tfc_"])
        texts = _as_texts(texts)
        Xw = self.tfw_.transform(texts)
        Xc = self.tfc_.transform(texts)
        return normalize(hstack([Xw, Xc]).tocsr(), norm="l2")

    @property
    def n_output_features(self) -> Optional[int]:
        if not hasattr(self, "tfw_"):
            return None
        if self.use_hashing:
            return 2 * self.n_features
        return len(self.tfw_.vocabulary_) + len(self.tfc_.vocabulary_)


def _as_texts(texts) -> List[str]:
    if isinstance(texts, str):
        raise TypeError("Expected an iterable of sentences, got a single string")
    return ["" if t is None else str(t) for t in texts]
