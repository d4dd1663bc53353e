"""Property-based tests for feed attribution."""

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from atom_strategies import authors, iris, timestamps, valid_entries
from atomfeed.errors import FeedIncomplete
from atomfeed.feed import Feed

large_documents = settings(
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow, HealthCheck.data_too_large],
)


class TestFeedProperties:
    """Property-based tests for Feed construction."""

    @large_documents
    @given(
        iris,
        timestamps,
        st.lists(authors, max_size=2),
        st.lists(valid_entries(), max_size=4),
    )
    def test_feed_attribution(self, feed_id, updated, feed_authors, entries):
        """
        Property 2: Feed attribution

        Construction succeeds iff the feed has authors, or has no entries,
        or every entry has authors.
        """
        expected = bool(feed_authors) or not entries or all(e.authors for e in entries)

        try:
            feed = Feed(
                id=feed_id,
                title="Feed",
                updated=updated,
                authors=feed_authors,
                entries=entries,
            )
            built = True
        except FeedIncomplete:
            built = False

        assert built == expected
        if built:
            assert list(feed.entries) == entries

    @large_documents
    @given(st.lists(valid_entries(with_authors=True), min_size=1, max_size=3), iris, timestamps)
    def test_self_attributed_entries_need_no_feed_authors(self, entries, feed_id, updated):
        feed = Feed(id=feed_id, title="Feed", updated=updated, entries=entries)
        assert feed.authors == ()
