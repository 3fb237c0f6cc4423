# coding=utf-8

from collections import namedtuple

# 最尤推定を表す文字列
LEARNING_MLE = "MLE"

# MAP推定を表す文字列
LEARNING_MAP = "MAP"

# 同点の場合に事前確率の大きいカテゴリを選ぶことを表す文字列
TIE_PRIOR = "prior"

# 同点の場合に例外を送出することを表す文字列
TIE_RAISE = "raise"

# 分類ラベル
LABEL_POSITIVE = "positive"
LABEL_NEGATIVE = "negative"

# 同点時の優先順もこの順序に従う
LABELS = (LABEL_POSITIVE, LABEL_NEGATIVE)

# デフォルトのストップワード
DEFAULT_STOPWORDS = frozenset(
        ["a", "this", "me", "are", "of", "is", "my", "these", "they"]
)


class NBParam(namedtuple(
        'NBParam',
        ('learning', 'alpha', 'tie_break'),
        defaults=(LEARNING_MLE, 1, TIE_PRIOR))):
    """ ナイーブベイズ分類器で用いるパラメータを格納するnamedtuple

    Attributes:
        learning (str): 学習方法（MLE or MAP）
                        MLEは最尤推定（相対頻度そのまま）、MAPはMAP推定を表す。
        alpha (int): ベータ分布のハイパーパラメータ（MAP推定で用いる）
                     単語の出現文書数にどれだけ下駄を履かせるかに相当
                     alpha=2でadd-one smoothing, alpha=1はMLEと一致する。
                     有限の値でなければならない。
        tie_break (str): スコアが同点の場合の扱い（prior or raise）
    """

    __slots__ = ()
