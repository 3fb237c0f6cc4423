# coding=utf-8

"""
学習済みモデルと分類結果を表す値オブジェクトを提供するモジュール
"""

from collections import namedtuple

from .const import LABEL_POSITIVE, LABEL_NEGATIVE

WordStats = namedtuple(
        'WordStats',
        ('word', 'n_pos', 'n_neg', 'p_pos', 'p_neg')
)

ClassPriors = namedtuple(
        'ClassPriors',
        (LABEL_POSITIVE, LABEL_NEGATIVE)
)

ScoredDocument = namedtuple(
        'ScoredDocument',
        ('document', 'tokens', 'scores', 'log_scores', 'label')
)


class NBModel(namedtuple(
        'NBModel',
        ('param', 'labels', 'vocab', 'stopwords',
            'doc_counts', 'word_counts', 'pwc', 'pc'))):
    """ 学習済みのナイーブベイズ分類器のパラメータを格納するnamedtuple

    numpyの配列は書き込み不可にしてあり、分類を何度行っても値は変わらない。

    Attributes:
        param (NBParam): 学習に用いたパラメータ
        labels (tuple): 分類ラベル, 配列の行の順序に対応する
        vocab (Vocab): 語彙
        stopwords (frozenset): ストップワードの集合
        doc_counts (np.ndarray): カテゴリごとの文書数, shape (カテゴリ数, )
        word_counts (np.ndarray): カテゴリごとの単語を含む文書数, shape (カテゴリ数, 語彙サイズ)
        pwc (np.ndarray): カテゴリごとの単語の生起確率, shape (カテゴリ数, 語彙サイズ)
        pc (ClassPriors): カテゴリの生起確率
    """

    __slots__ = ()

    def label_index(self, label):
        """ ラベルに対応する配列の行インデクスを返す。
        """

        return self.labels.index(label)

    def prior(self, label):
        return getattr(self.pc, label)

    def likelihood(self, label, word):
        """ 単語wordのカテゴリlabelにおける生起確率を返す。

        Args:
            label (str): 分類ラベル
            word (str): 単語

        Returns:
            float: P(word | label)

        Raises:
            KeyError: wordが語彙に含まれない場合
        """

        return float(
                self.pwc[self.label_index(label), self.vocab.w2i[word]]
        )
