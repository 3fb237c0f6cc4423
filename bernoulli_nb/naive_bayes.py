# coding=utf-8

"""
ナイーブベイズ分類器を提供するモジュール
"""

import logging
from abc import ABCMeta, abstractmethod

import numpy as np
from scipy.special import logsumexp
from tqdm import tqdm

from .const import (
        NBParam,
        LEARNING_MLE,
        LEARNING_MAP,
        TIE_PRIOR,
        TIE_RAISE,
        LABELS,
        DEFAULT_STOPWORDS
)
from .errors import (
        AmbiguousDecisionError,
        DegenerateModelError,
        EmptyClassError,
        EmptyVocabularyError,
        UnknownClassError
)
from .model import ClassPriors, NBModel, ScoredDocument, WordStats
from .vocab import Vocab, tokenize, remove_stopwords

logger = logging.getLogger(__name__)


def _freeze(arr):
    arr.setflags(write=False)
    return arr


class NaiveBayes(metaclass=ABCMeta):
    """ ナイーブベイズ分類器の抽象クラス

    分類器自身はパラメータのみを保持し、学習結果はfitが返すNBModelに格納する。

    Attributes:
        learning (str): 学習方法（MLE or MAP）
        alpha (int): ベータ分布のハイパーパラメータ（MAP推定で用いる）
        　　　　　　 単語の出現文書数にどれだけ下駄を履かせるかに相当
        tie_break (str): 同点の場合の扱い（prior or raise）
        progress (bool): 進捗バーを表示するか否か
    """

    def __init__(self, param=NBParam(), progress=False):
        """ 学習方法、パラメータの初期化を行う。

        Args:
            param (NBParam): ナイーブベイズ分類器で用いるパラメータを格納したnamedtuple
            progress (bool): 進捗バーを表示するか否か

        Raises:
            ValueError: パラメータが不正な場合
        """

        if param.learning not in (LEARNING_MLE, LEARNING_MAP):
            raise ValueError(
                    "unknown learning method: {!r}".format(param.learning))
        if not np.isfinite(param.alpha) or param.alpha < 1:
            raise ValueError(
                    "alpha must be a finite number >= 1, got {}".format(
                        param.alpha))
        if param.tie_break not in (TIE_PRIOR, TIE_RAISE):
            raise ValueError(
                    "unknown tie break policy: {!r}".format(param.tie_break))

        self.param = param
        self.learning = param.learning
        self.alpha = param.alpha
        self.tie_break = param.tie_break
        self.progress = progress

    def fit(self, train, stopwords=DEFAULT_STOPWORDS):
        """ パラメータの学習を行い、学習済みモデルを返す。

        Args:
            train (iterable): (文書, ラベル) を要素として持つiterable
            stopwords (iterable): ストップワード

        Returns:
            NBModel: 学習済みモデル

        Raises:
            UnknownClassError: 未知のラベルが含まれる場合
            EmptyClassError: 文書が一つもないカテゴリがある場合
            EmptyVocabularyError: ストップワード除去後に語彙が空になる場合
        """

        stopwords = frozenset(w.lower() for w in stopwords)
        docs = self.split_by_label(train, stopwords)
        vocab = Vocab.build(
                words for label in LABELS for words in docs[label])
        if len(vocab) == 0:
            raise EmptyVocabularyError(
                    "no tokens left after removing stop words")

        logger.info(
                "vocabulary size %d, documents %s", len(vocab),
                ", ".join("{}={}".format(l, len(docs[l])) for l in LABELS))
        logger.debug("estimating parameters by %s", self.learning)

        doc_counts, word_counts = self.count(docs, vocab)
        if self.learning == LEARNING_MLE:
            pwc, pc = self.MLE(doc_counts, word_counts)
        else:
            pwc, pc = self.MAP(doc_counts, word_counts)

        return NBModel(
                param=self.param,
                labels=LABELS,
                vocab=vocab,
                stopwords=stopwords,
                doc_counts=_freeze(doc_counts),
                word_counts=_freeze(word_counts),
                pwc=_freeze(pwc),
                pc=ClassPriors(*(float(p) for p in pc))
        )

    def split_by_label(self, train, stopwords):
        """ 訓練データをカテゴリごとに分け、各文書をストップワードを除いた単語の集合にする。

        Args:
            train (iterable): (文書, ラベル) を要素として持つiterable
            stopwords (frozenset): ストップワードの集合

        Returns:
            dict: カテゴリをkey, 各文書の単語集合のリストをvalueとして持つdict
        """

        docs = {label: [] for label in LABELS}
        for text, label in train:
            if label not in docs:
                raise UnknownClassError(label, LABELS)
            docs[label].append(
                    frozenset(remove_stopwords(tokenize(text), stopwords)))

        for label in LABELS:
            if not docs[label]:
                raise EmptyClassError(
                        "no training documents for class {!r}".format(label))

        return docs

    def count(self, docs, vocab):
        """ カテゴリごとの文書数と、各単語を含む文書数を数える。

        Args:
            docs (dict): カテゴリをkey, 各文書の単語集合のリストをvalueとして持つdict
            vocab (Vocab): 語彙

        Returns:
            np.ndarray: カテゴリごとの文書数
            np.ndarray: カテゴリごとの各単語を含む文書数
        """

        doc_counts = np.zeros((len(LABELS), ), dtype=np.int64)
        word_counts = np.zeros((len(LABELS), len(vocab)), dtype=np.int64)
        for catid, label in enumerate(
                tqdm(LABELS, disable=not self.progress)):
            doc_counts[catid] = len(docs[label])
            for words in docs[label]:
                word_counts[catid] += vocab.indicator(words)

        return doc_counts, word_counts

    @abstractmethod
    def MLE(self, doc_counts, word_counts):
        """ 最尤推定を用いてパラメータを推定する。

        Args:
            doc_counts (np.ndarray): カテゴリごとの文書数
            word_counts (np.ndarray): カテゴリごとの各単語を含む文書数

        Returns:
            np.ndarray: カテゴリごとの単語の生起確率
            np.ndarray: カテゴリの生起確率
        """

        raise NotImplementedError()

    @abstractmethod
    def MAP(self, doc_counts, word_counts):
        """ MAP推定を用いてパラメータを推定する。

        Args:
            doc_counts (np.ndarray): カテゴリごとの文書数
            word_counts (np.ndarray): カテゴリごとの各単語を含む文書数

        Returns:
            np.ndarray: カテゴリごとの単語の生起確率
            np.ndarray: カテゴリの生起確率
        """

        raise NotImplementedError()

    @abstractmethod
    def log_scores(self, model, document):
        """ 文書の各カテゴリに対する対数スコアを計算する。

        Args:
            model (NBModel): 学習済みモデル
            document (str): 文書

        Returns:
            list: ストップワードを除いた文書の単語リスト
            np.ndarray: カテゴリごとの log(尤度 × 事前確率)
        """

        raise NotImplementedError()

    def classify(self, model, document):
        """ 学習済みモデルを用いて、文書のカテゴリを分類する。

        Args:
            model (NBModel): 学習済みモデル
            document (str): 文書

        Returns:
            ScoredDocument: カテゴリごとのスコアと分類結果

        Raises:
            DegenerateModelError: 確率0の因子によってスコアが0に潰れる場合
            AmbiguousDecisionError: tie_breakがraiseで、スコアが同点の場合
        """

        tokens, log_scores = self.log_scores(model, document)
        label = self.decide(model, log_scores)

        return ScoredDocument(
                document=document,
                tokens=tuple(tokens),
                scores={
                    l: float(np.exp(s))
                    for l, s in zip(model.labels, log_scores)
                },
                log_scores={
                    l: float(s) for l, s in zip(model.labels, log_scores)
                },
                label=label
        )

    def decide(self, model, log_scores):
        """ 対数スコアが最大となるカテゴリを返す。

        Args:
            model (NBModel): 学習済みモデル
            log_scores (np.ndarray): カテゴリごとの対数スコア

        Returns:
            str: 分類結果のラベル
        """

        best = log_scores.max()
        tied = [l for l, s in zip(model.labels, log_scores) if s == best]
        if len(tied) == 1:
            return tied[0]

        if self.tie_break == TIE_RAISE:
            raise AmbiguousDecisionError(tied)

        # 事前確率が大きい方、それも同じならLABELSの順
        label = max(
                tied,
                key=lambda l: (model.prior(l), -model.label_index(l))
        )
        logger.debug("tie between %s resolved to %s", tied, label)
        return label

    def predict(self, model, test, get_score=False):
        """ 学習済みモデルを用いて、複数の文書のカテゴリを分類する。

        Args:
            model (NBModel): 学習済みモデル
            test (list): 予測を行う文書のリスト
            get_score (bool): 予測ラベルのスコアを返すか否か

        Returns:
            list: 予測結果のラベル系列
            　　　get_scoreがTrueの時は (ラベル, スコア) の系列
        """

        results = [
                self.classify(model, document)
                for document in tqdm(test, disable=not self.progress)
        ]

        if get_score:
            return [(r.label, r.scores[r.label]) for r in results]
        else:
            return [r.label for r in results]

    def posterior(self, model, document):
        """ 文書が各カテゴリに属する事後確率を返す。

        Args:
            model (NBModel): 学習済みモデル
            document (str): 文書

        Returns:
            dict: カテゴリをkey, 事後確率をvalueとして持つdict
        """

        _, log_scores = self.log_scores(model, document)
        log_post = log_scores - logsumexp(log_scores)
        return {l: float(np.exp(p)) for l, p in zip(model.labels, log_post)}

    @staticmethod
    def word_stats(model):
        """ 語彙の各単語について、カテゴリごとの文書数と生起確率を返す。

        Args:
            model (NBModel): 学習済みモデル

        Returns:
            list: WordStatsを語彙の順に並べたリスト
        """

        pos = model.label_index(LABELS[0])
        neg = model.label_index(LABELS[1])
        return [
                WordStats(
                    word=w,
                    n_pos=int(model.word_counts[pos, wid]),
                    n_neg=int(model.word_counts[neg, wid]),
                    p_pos=float(model.pwc[pos, wid]),
                    p_neg=float(model.pwc[neg, wid])
                )
                for wid, w in enumerate(model.vocab.i2w)
        ]

    @staticmethod
    def informative_words(model, label, top_n=10):
        """ labelらしさを表す単語を対数尤度比の大きい順に返す。

        生起確率が0の単語は±infになる。

        Args:
            model (NBModel): 学習済みモデル
            label (str): 対象のカテゴリ
            top_n (int): 返す単語の数

        Returns:
            list: (単語, 対数尤度比) を要素として持つリスト
        """

        if label not in model.labels:
            raise UnknownClassError(label, model.labels)

        catid = model.label_index(label)
        with np.errstate(divide="ignore"):
            log_pwc = np.log(model.pwc)
        others = np.delete(log_pwc, catid, axis=0).mean(axis=0)
        ratios = log_pwc[catid] - others

        ranked = sorted(
                zip(model.vocab.i2w, ratios),
                key=lambda x: (-x[1], x[0])
        )
        return [(w, float(r)) for w, r in ranked[:top_n]]


class MultivariateBernoulli(NaiveBayes):
    """ 多変数ベルヌーイモデルを実装したクラス

    文書を語彙上の0/1ベクトルで表し、単語の出現・非出現の両方を尤度に含める。
    """

    def MLE(self, doc_counts, word_counts):
        """ 最尤推定を用いてパラメータを推定する。

        相対頻度をそのまま確率とするため、片方のカテゴリにしか出現しない
        単語の生起確率は0になる。

        Args:
            doc_counts (np.ndarray): カテゴリごとの文書数
            word_counts (np.ndarray): カテゴリごとの各単語を含む文書数

        Returns:
            np.ndarray: カテゴリごとの単語の生起確率
            np.ndarray: カテゴリの生起確率
        """

        N = doc_counts.sum()
        pwc = word_counts / doc_counts[:, np.newaxis]
        pc = doc_counts / N
        return pwc, pc

    def MAP(self, doc_counts, word_counts):
        """ MAP推定を用いてパラメータを推定する。

        Args:
            doc_counts (np.ndarray): カテゴリごとの文書数
            word_counts (np.ndarray): カテゴリごとの各単語を含む文書数

        Returns:
            np.ndarray: カテゴリごとの単語の生起確率
            np.ndarray: カテゴリの生起確率
        """

        N = doc_counts.sum()
        cat_num = len(doc_counts)
        pwc = (word_counts + (self.alpha - 1)) / (
                doc_counts[:, np.newaxis] + 2 * (self.alpha - 1))
        pc = (doc_counts + (self.alpha - 1)) / (
                N + cat_num * (self.alpha - 1))
        return pwc, pc

    def log_scores(self, model, document):
        """ 文書の各カテゴリに対する対数スコアを計算する。

        Args:
            model (NBModel): 学習済みモデル
            document (str): 文書

        Returns:
            list: ストップワードを除いた文書の単語リスト
            np.ndarray: カテゴリごとの log(尤度 × 事前確率)

        Raises:
            DegenerateModelError: 確率0の因子がある場合
        """

        words = remove_stopwords(tokenize(document), model.stopwords)
        b = model.vocab.indicator(words)
        factors = np.where(b == 1, model.pwc, 1.0 - model.pwc)

        zero = factors == 0.0
        if zero.any():
            zero_factors = {
                    label: tuple(
                        model.vocab.i2w[wid]
                        for wid in np.flatnonzero(zero[catid]))
                    for catid, label in enumerate(model.labels)
                    if zero[catid].any()
            }
            logger.warning(
                    "likelihood collapses to zero for %r: %s",
                    document, zero_factors)
            raise DegenerateModelError(document, zero_factors)

        pc = np.asarray([model.prior(l) for l in model.labels])
        return words, np.log(factors).sum(axis=1) + np.log(pc)
