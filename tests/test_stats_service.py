"""
Tests for dashboard chart data
"""
from gameshelf.services.stats_service import catalog_stats, rating_histogram, releases_per_year


class TestRatingHistogram:
    """Tests for rating_histogram"""

    def test_buckets_and_labels(self):
        """Test ten buckets with 100 in the last one and nulls ignored"""
        games = [{'rating': 0}, {'rating': 9.9}, {'rating': 75}, {'rating': 100}, {'rating': None}, {}]

        histogram = rating_histogram(games)

        assert [b['label'] for b in histogram][:2] == ['0-9', '10-19']
        assert histogram[-1] == {'label': '90-100', 'count': 1}
        assert histogram[0]['count'] == 2
        assert histogram[7]['count'] == 1
        assert sum(b['count'] for b in histogram) == 4


class TestReleasesPerYear:
    """Tests for releases_per_year"""

    def test_years_ascending(self, sample_serialized_games):
        """Test years are counted in ascending order, unknown dates skipped"""
        assert releases_per_year(sample_serialized_games) == [
            {'year': 2010, 'count': 1},
            {'year': 2019, 'count': 1},
            {'year': 2021, 'count': 1},
        ]


class TestCatalogStats:
    """Tests for catalog_stats"""

    def test_summary(self, sample_serialized_games):
        """Test totals, average and distributions"""
        stats = catalog_stats(sample_serialized_games)

        assert stats['total'] == 4
        assert stats['average_rating'] == 85.0
        assert stats['genres'] == [
            {'name': 'Adventure', 'count': 2},
            {'name': 'Shooter', 'count': 2},
        ]
        assert stats['platforms'][0] == {'name': 'Nintendo Switch', 'count': 2}
        assert stats['platforms'][-1] == {'name': 'PlayStation 4', 'count': 1}

    def test_empty_catalog(self):
        """Test an empty catalog has no average"""
        stats = catalog_stats([])

        assert stats['total'] == 0
        assert stats['average_rating'] is None
        assert stats['genres'] == []
        assert stats['years'] == []
