from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional

import pandas as pd

from tokenrank.core.normalization.base import TextNormalizer
from tokenrank.core.normalization.config import NormalizationConfig
from tokenrank.core.normalization.normalizer import DefaultTextNormalizer
from tokenrank.core.plotting.base import PlotRenderer
from tokenrank.core.plotting.renderer import PlotlyZipfRenderer
from tokenrank.core.proper_nouns.base import EvidenceCollector
from tokenrank.core.proper_nouns.collector import LowercaseEvidenceCollector
from tokenrank.core.ranking.base import FrequencyEntry, FrequencyRanker
from tokenrank.core.ranking.config import RankingConfig
from tokenrank.core.ranking.ranker import DefaultFrequencyRanker
from tokenrank.core.report.base import ReportSink, ReportWriter
from tokenrank.core.report.config import ReportConfig
from tokenrank.core.report.writer import LineReportWriter
from tokenrank.core.stemming.base import Stemmer
from tokenrank.core.stemming.config import StemmingConfig
from tokenrank.core.stemming.stemmer import SnowballTokenStemmer
from tokenrank.core.stopword_removal.base import StopwordRemover
from tokenrank.core.stopword_removal.config import StopwordConfig
from tokenrank.core.stopword_removal.removal import DefaultStopwordRemover
from tokenrank.core.tokenization.base import Tokenizer
from tokenrank.core.tokenization.config import TokenizationConfig
from tokenrank.core.tokenization.tokenizer import DefaultTokenizer
from tokenrank.messages.analysis_messages import INPUT_NOT_READABLE, INPUT_NOT_TEXT
from tokenrank.schemas.run_config import RunConfig
from tokenrank.utils.exceptions import InputReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    entries: List[FrequencyEntry]
    total_tokens: int  # survivors of stopword/empty filtering
    stopword_count: int
    evidence: FrozenSet[str] = field(default_factory=frozenset)

    def counts(self) -> List[int]:
        """The only thing the plot renderer consumes."""
        return [e.count for e in self.entries]

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(self.entries, columns=["count", "token"])
        df.insert(0, "rank", range(1, len(df) + 1))
        return df


def read_text(path: str | Path, encoding: str = "utf-8") -> str:
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise InputReadError(
            code="INPUT_NOT_TEXT", message=f"{INPUT_NOT_TEXT} ({p})"
        ) from e
    except OSError as e:
        raise InputReadError(
            code="INPUT_NOT_READABLE",
            message=f"{INPUT_NOT_READABLE} ({p}: {e.strerror})",
        ) from e


class AnalysisService:
    """
    Pipeline context for one run:
      1) strip punctuation (original casing kept)
      2) collect proper-noun evidence from stage 1, when the filter is on
      3) lowercase
      4) tokenize, drop stopwords, stem
      5) count and rank
    Every collaborator is built once and passed in; nothing is module-global.
    """

    def __init__(
        self,
        normalizer: TextNormalizer,
        tokenizer: Tokenizer,
        remover: StopwordRemover,
        stemmer: Stemmer,
        ranker: FrequencyRanker,
        *,
        evidence_collector: Optional[EvidenceCollector] = None,
        writer: Optional[ReportWriter] = None,
        plotter: Optional[PlotRenderer] = None,
    ):
        self.normalizer = normalizer
        self.tokenizer = tokenizer
        self.remover = remover
        self.stemmer = stemmer
        self.ranker = ranker
        self.evidence_collector = evidence_collector
        self.writer = writer or LineReportWriter()
        self.plotter = plotter or PlotlyZipfRenderer()

    def tokens(self, text: str) -> List[str]:
        normalized = self.normalizer.normalize(text)
        toks = self.tokenizer.tokenize(normalized)
        kept, removed = self.remover.remove(toks)
        logger.debug(f"Tokens: {len(toks)} total, {len(removed)} stopwords removed")
        return self.stemmer.stem(kept)

    def evidence(self, text: str) -> FrozenSet[str]:
        """
        Lowercase-initial words, split on the same boundaries as the tokens
        and stemmed like them, so the ranker compares like with like.
        """
        if self.evidence_collector is None:
            return frozenset()
        words = self.tokenizer.tokenize(self.normalizer.strip(text))
        found = self.evidence_collector.collect(words)
        return frozenset(self.stemmer.stem(sorted(found)))

    def analyze(self, text: str) -> AnalysisResult:
        evidence = self.evidence(text)
        if self.evidence_collector is not None:
            logger.debug(f"Proper-noun evidence: {len(evidence)} lowercase words")

        toks = self.tokens(text)
        entries = self.ranker.rank(toks, evidence)
        logger.debug(f"Ranked {len(entries)} distinct tokens")
        return AnalysisResult(
            entries=entries,
            total_tokens=len(toks),
            stopword_count=len(self.remover.stopwords),
            evidence=evidence,
        )

    def write_report(self, result: AnalysisResult, sink: ReportSink) -> int:
        with sink:
            return self.writer.write(result.entries, sink)

    def render_plot(self, result: AnalysisResult, path: str | Path) -> Path:
        return self.plotter.render(result.counts(), path)


def build_service(config: RunConfig) -> AnalysisService:
    """Wire every stage from the run options."""
    return AnalysisService(
        normalizer=DefaultTextNormalizer(
            NormalizationConfig(
                strip_punctuation=config.strip_punctuation,
                lowercase=config.lowercase,
            )
        ),
        tokenizer=DefaultTokenizer(
            TokenizationConfig(
                method="whitespace" if config.strip_punctuation else "wordpunct"
            )
        ),
        remover=DefaultStopwordRemover(
            StopwordConfig(
                enabled=config.remove_stopwords, lowercase=config.lowercase
            )
        ),
        stemmer=SnowballTokenStemmer(StemmingConfig(enabled=config.stem)),
        ranker=DefaultFrequencyRanker(
            RankingConfig(proper_noun_filter=config.proper_noun_filter)
        ),
        evidence_collector=(
            LowercaseEvidenceCollector() if config.proper_noun_filter else None
        ),
        writer=LineReportWriter(ReportConfig(top=config.top)),
    )
