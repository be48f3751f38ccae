import re
from typing import List, Tuple
from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity

import config

# TF-IDF similarity blended with job-description keyword coverage.
# Each resume is vectorised together with the job description only, so a
# score never depends on which other resumes are in the same batch.


def _keyword_pattern(keyword: str) -> re.Pattern:
    body = re.escape(keyword).replace(r"\ ", r"\s+")
    return re.compile(r"\b" + body + r"\b", re.I)


class ResumeMatcher:
    def __init__(self, similarity_weight: float = None, keyword_limit: int = None):
        if similarity_weight is None:
            similarity_weight = config.MATCH_SIMILARITY_WEIGHT
        if keyword_limit is None:
            keyword_limit = config.MATCH_KEYWORDS
        self.similarity_weight = min(max(similarity_weight, 0.0), 1.0)
        self.keyword_limit = keyword_limit

    def similarity(self, job_description: str, resume: str) -> float:
        if not job_description.strip() or not resume.strip():
            return 0.0
        vectorizer = TfidfVectorizer(stop_words='english', max_features=5000)
        try:
            tfidf = vectorizer.fit_transform([job_description, resume])
        except ValueError:
            # only stop words on both sides
            return 0.0
        return float(cosine_similarity(tfidf[0], tfidf[1])[0][0])

    def keywords(self, job_description: str, limit: int = None) -> List[str]:
        """Most characteristic unigrams and bigrams of the job description."""
        limit = self.keyword_limit if limit is None else limit
        if not job_description.strip() or limit <= 0:
            return []
        vectorizer = TfidfVectorizer(stop_words='english', ngram_range=(1, 2))
        try:
            tfidf = vectorizer.fit_transform([job_description])
        except ValueError:
            return []
        weights = tfidf.toarray()[0]
        terms = vectorizer.get_feature_names_out()
        candidates = []
        for term, weight in zip(terms, weights):
            # bigrams glued across dropped stop words never occur verbatim
            m = _keyword_pattern(term).search(job_description)
            if weight > 0 and m:
                candidates.append((-weight, m.start(), term))
        # ties go to the term mentioned first
        return [term for _, _, term in sorted(candidates)[:limit]]

    def keyword_gaps(self, job_description: str, resume: str) -> Tuple[List[str], List[str]]:
        matched, missing = [], []
        for kw in self.keywords(job_description):
            if resume and _keyword_pattern(kw).search(resume):
                matched.append(kw)
            else:
                missing.append(kw)
        return matched, missing

    def coverage(self, job_description: str, resume: str) -> float:
        matched, missing = self.keyword_gaps(job_description, resume)
        total = len(matched) + len(missing)
        return len(matched) / total if total else 0.0

    def score_one(self, job_description: str, resume: str) -> int:
        if not resume or not resume.strip():
            return 0
        w = self.similarity_weight
        blended = w * self.similarity(job_description, resume) + (1 - w) * self.coverage(job_description, resume)
        return int(min(max(round(blended * 100), 0), 100))

    def score(self, job_description: str, resumes: List[str]) -> List[int]:
        if not resumes:
            return []
        return [self.score_one(job_description, r) for r in resumes]


matcher = ResumeMatcher()
