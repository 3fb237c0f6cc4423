# coding=utf-8

"""
分類器が送出する例外を定義するモジュール
"""


class NaiveBayesError(Exception):
    """ bernoulli_nbの例外の基底クラス
    """


class DegenerateModelError(NaiveBayesError):
    """ 確率0の因子によって尤度の積が0に潰れたことを表す例外

    Attributes:
        document (str): 分類しようとした文書
        zero_factors (dict): カテゴリをkey, 因子が0になった単語のtupleをvalueとして持つdict
    """

    def __init__(self, document, zero_factors):
        self.document = document
        self.zero_factors = zero_factors
        detail = "; ".join(
                "{}: {}".format(label, ", ".join(words))
                for label, words in zero_factors.items()
        )
        super(DegenerateModelError, self).__init__(
                "zero-probability factor collapses the likelihood "
                "({})".format(detail)
        )


class EmptyVocabularyError(NaiveBayesError):
    """ ストップワード除去の結果、語彙が空になったことを表す例外
    """


class UnknownClassError(NaiveBayesError, ValueError):
    """ 未知の分類ラベルが与えられたことを表す例外

    Attributes:
        label (str): 与えられたラベル
    """

    def __init__(self, label, known):
        self.label = label
        super(UnknownClassError, self).__init__(
                "unknown class {!r}, expected one of {}".format(
                    label, ", ".join(known))
        )


class EmptyClassError(NaiveBayesError):
    """ 訓練データに文書が一つもないカテゴリがあることを表す例外
    """


class AmbiguousDecisionError(NaiveBayesError):
    """ 同点のため分類結果が決まらないことを表す例外

    Attributes:
        labels (tuple): 同点となったカテゴリ
    """

    def __init__(self, labels):
        self.labels = tuple(labels)
        super(AmbiguousDecisionError, self).__init__(
                "tie between {}".format(", ".join(self.labels))
        )
