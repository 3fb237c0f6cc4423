# coding=utf-8

"""
語彙を扱う機能を提供するモジュール
"""

from types import MappingProxyType

import numpy as np


def tokenize(text):
    """ テキストを空白で分割し、小文字化した単語リストを返す。

    Args:
        text (str): 文書

    Returns:
        list: 単語リスト
    """

    return [w.lower() for w in text.split()]


def remove_stopwords(words, stopwords):
    """ 単語リストからストップワードを取り除く。

    Args:
        words (list): 単語リスト
        stopwords (frozenset): ストップワードの集合

    Returns:
        list: ストップワードを除いた単語リスト
    """

    return [w for w in words if w not in stopwords]


class Vocab():
    """ 語彙情報を扱うクラス

    語彙は単語の集合として扱い、インデクスは単語をソートした順に振る。
    訓練文書の順序によって語彙のインデクスが変わることはない。

    Attributes:
        size (int): 語彙のサイズ
        w2i (MappingProxyType): 単語と単語インデクスのマップ（読み取り専用）
        i2w (tuple): 単語インデクスと単語のマップ
    """

    def __init__(self, words):
        """ 単語の集合を受け取り、マップの初期化を行う。

        Args:
            words (iterable): 語彙に含める単語
        """

        self._i2w = tuple(sorted(set(words)))
        self._w2i = MappingProxyType(
                {w: i for i, w in enumerate(self._i2w)})

    @property
    def i2w(self):
        return self._i2w

    @property
    def w2i(self):
        return self._w2i

    @property
    def size(self):
        return len(self._i2w)

    @classmethod
    def build(cls, docs):
        """ 単語リストのリストから語彙を作成する。

        Args:
            docs (list): 各文書の単語リストを要素として持つリスト

        Returns:
            Vocab: 作成した語彙
        """

        return cls(w for words in docs for w in words)

    def __len__(self):
        return self.size

    def __contains__(self, word):
        return word in self.w2i

    def __iter__(self):
        return iter(self.i2w)

    def __eq__(self, other):
        if not isinstance(other, Vocab):
            return NotImplemented
        return self.i2w == other.i2w

    def __hash__(self):
        return hash(self.i2w)

    def __repr__(self):
        return "Vocab(size={})".format(self.size)

    def indicator(self, words):
        """ 単語リストを語彙上の0/1ベクトルに変換する。

        語彙に含まれない単語は無視する。

        Args:
            words (list): 単語リスト

        Returns:
            np.ndarray: 単語が文書に出現すれば1, そうでなければ0を持つベクトル
        """

        b = np.zeros((self.size, ), dtype=np.int8)
        wordids = [self.w2i[w] for w in words if w in self.w2i]
        b[wordids] = 1
        return b
