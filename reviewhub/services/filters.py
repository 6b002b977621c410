from typing import Callable

from reviewhub.schemas.reviews import CombinedReview, FilterSpecification, SortBy, SortOrder

Predicate = Callable[[CombinedReview], bool]


def _search_stage(spec: FilterSpecification) -> Predicate | None:
    if not spec.search_term:
        return None
    term = spec.search_term.lower()

    def matches(review: CombinedReview) -> bool:
        fields = (
            review.guest_name, review.author,
            review.comment, review.text,
            review.listing_name, review.property_name,
        )
        return any(term in field.lower() for field in fields)

    return matches


def _type_stage(spec: FilterSpecification) -> Predicate | None:
    if spec.type is None:
        return None
    return lambda review: review.type == spec.type


def _status_stage(spec: FilterSpecification) -> Predicate | None:
    if spec.status is None:
        return None
    return lambda review: review.status == spec.status


def _listing_stage(spec: FilterSpecification) -> Predicate | None:
    if not spec.listing_name:
        return None
    return lambda review: review.listing_name == spec.listing_name


def _rating_stage(spec: FilterSpecification) -> Predicate | None:
    if spec.min_rating is None and spec.max_rating is None:
        return None

    def within(review: CombinedReview) -> bool:
        # an unrated review cannot satisfy a numeric bound
        if review.overall_rating is None:
            return False
        if spec.min_rating is not None and review.overall_rating < spec.min_rating:
            return False
        if spec.max_rating is not None and review.overall_rating > spec.max_rating:
            return False
        return True

    return within


def _date_stage(spec: FilterSpecification) -> Predicate | None:
    date_range = spec.date_range
    if date_range is None or (date_range.start is None and date_range.end is None):
        return None

    def within(review: CombinedReview) -> bool:
        if date_range.start is not None and review.submitted_at < date_range.start:
            return False
        if date_range.end is not None and review.submitted_at > date_range.end:
            return False
        return True

    return within


def _source_stage(spec: FilterSpecification) -> Predicate | None:
    if spec.source_filter is None:
        return None
    return lambda review: review.source == spec.source_filter


def _language_stage(spec: FilterSpecification) -> Predicate | None:
    if not spec.language:
        return None
    return lambda review: review.language == spec.language


def _category_stage(spec: FilterSpecification) -> Predicate | None:
    if not spec.category:
        return None
    return lambda review: review.categories.get(spec.category) is not None


STAGES = (
    _search_stage,
    _type_stage,
    _status_stage,
    _listing_stage,
    _rating_stage,
    _date_stage,
    _source_stage,
    _language_stage,
    _category_stage,
)


def build_predicates(spec: FilterSpecification) -> list[Predicate]:
    """The active filter stages for a filter specification, in pipeline order."""
    return [p for p in (stage(spec) for stage in STAGES) if p is not None]


def filter_reviews(reviews: list[CombinedReview], spec: FilterSpecification) -> list[CombinedReview]:
    predicates = build_predicates(spec)
    return [r for r in reviews if all(p(r) for p in predicates)]


def sort_reviews(
    reviews: list[CombinedReview],
    sort_by: SortBy | None = None,
    sort_order: SortOrder = SortOrder.desc,
) -> list[CombinedReview]:
    """Stable sort by date (default), rating or guest name.

    Reviews without a rating always go last when sorting by rating.
    """
    descending = sort_order == SortOrder.desc
    sort_by = sort_by or SortBy.date

    if sort_by == SortBy.rating:
        rated = [r for r in reviews if r.overall_rating is not None]
        unrated = [r for r in reviews if r.overall_rating is None]
        return sorted(rated, key=lambda r: r.overall_rating, reverse=descending) + unrated

    if sort_by == SortBy.guest_name:
        return sorted(reviews, key=lambda r: r.guest_name.lower(), reverse=descending)

    return sorted(reviews, key=lambda r: r.submitted_at, reverse=descending)


def apply_filters(reviews: list[CombinedReview], spec: FilterSpecification) -> list[CombinedReview]:
    """Filter then sort. Returns a new list; the input is left untouched."""
    return sort_reviews(filter_reviews(reviews, spec), spec.sort_by, spec.sort_order)
