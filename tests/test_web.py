"""
Tests for the dashboard, detail page and game forms
"""
from unittest.mock import patch

from sqlalchemy.exc import SQLAlchemyError

from gameshelf.repositories.game_repository import GameRepository


class TestDashboard:
    """Tests for /dashboard"""

    def test_root_redirects(self, client):
        """Test / sends the browser to the dashboard"""
        response = client.get('/')

        assert response.status_code == 302
        assert response.headers['Location'].endswith('/dashboard')

    def test_lists_games(self, client, sample_games):
        """Test every game is shown with the found count"""
        html = client.get('/dashboard').get_data(as_text=True)

        assert '3 games found' in html
        assert 'Hades' in html
        assert 'Unrated Prototype' in html

    def test_genre_filter(self, client, sample_games):
        """Test the genre query arg filters the cards"""
        html = client.get('/dashboard?genre=Indie').get_data(as_text=True)

        assert '2 games found' in html
        assert 'Unrated Prototype</a>' not in html

    def test_empty_result_offers_clear(self, client, sample_games):
        """Test no match shows the clear filters action"""
        html = client.get('/dashboard?genre=Racing').get_data(as_text=True)

        assert '0 games found' in html
        assert 'Clear filters' in html

    def test_list_view(self, client, sample_games):
        """Test the view arg switches to the list layout"""
        html = client.get('/dashboard?view=list').get_data(as_text=True)

        assert 'id="games" class="list"' in html

    def test_unknown_view_falls_back_to_grid(self, client, sample_games):
        """Test an unknown view arg renders the grid"""
        html = client.get('/dashboard?view=table').get_data(as_text=True)

        assert 'id="games" class="grid"' in html

    def test_load_error_shows_retry(self, client):
        """Test a database error is shown inline with a retry link"""
        with patch('gameshelf.routes.web.game_service.list_games', side_effect=SQLAlchemyError('boom')):
            response = client.get('/dashboard')

        html = response.get_data(as_text=True)
        assert response.status_code == 200
        assert 'Error fetching games' in html
        assert 'Retry' in html


class TestGameDetail:
    """Tests for /games/<id>"""

    def test_detail_page(self, client, sample_games):
        """Test the detail page shows tags and the stats strip"""
        hades = sample_games[0]

        html = client.get(f'/games/{hades.id}').get_data(as_text=True)

        assert 'Hades' in html
        assert 'Role-playing (RPG)' in html
        assert 'Nintendo Switch' in html
        assert 'September 17, 2020' in html
        assert '2020' in html

    def test_missing_game(self, client):
        """Test an unknown game is an HTML 404 linking back to the dashboard"""
        response = client.get('/games/999')
        html = response.get_data(as_text=True)

        assert response.status_code == 404
        assert response.mimetype == 'text/html'
        assert 'Game not found' in html
        assert 'href="/dashboard"' in html

    def test_missing_game_edit_page(self, client):
        """Test the edit form of an unknown game is an HTML 404"""
        response = client.get('/games/999/edit')

        assert response.status_code == 404
        assert response.mimetype == 'text/html'
        assert 'Game not found' in response.get_data(as_text=True)

    def test_id_beyond_64_bits(self, client):
        """Test an id too large for the database is a 404 page"""
        for path in ('/games/100000000000000000000', '/games/100000000000000000000/edit'):
            response = client.get(path)

            assert response.status_code == 404
            assert response.mimetype == 'text/html'


class TestGameForms:
    """Tests for the add and edit forms"""

    def test_add_form_renders(self, client):
        """Test the empty add form"""
        response = client.get('/games/add')

        assert response.status_code == 200
        assert 'name="igdbId"' in response.get_data(as_text=True)

    def test_add_game(self, client):
        """Test a valid form creates the game with comma separated tags"""
        form = {
            'name': 'Celeste', 'igdbId': '26226', 'rating': '88', 'releaseDate': '2018-01-25',
            'coverUrl': '', 'genres': 'Platform, Indie, ', 'platforms': 'Nintendo Switch',
        }

        response = client.post('/games/add', data=form)

        game = GameRepository.get_by_igdb_id(26226)
        assert response.status_code == 302
        assert response.headers['Location'].endswith(f'/games/{game.id}')
        assert [g.name for g in game.genres] == ['Platform', 'Indie']

    def test_add_invalid_rerenders(self, client):
        """Test validation errors re-render the form with the message and the input"""
        response = client.post('/games/add', data={'name': 'No id', 'igdbId': ''})
        html = response.get_data(as_text=True)

        assert response.status_code == 400
        assert 'name and igdbId are required' in html
        assert 'value="No id"' in html

    def test_edit_form_prefilled(self, client, sample_games):
        """Test the edit form shows the stored values"""
        hades = sample_games[0]

        html = client.get(f'/games/{hades.id}/edit').get_data(as_text=True)

        assert 'value="Hades"' in html
        assert 'value="2020-09-17"' in html
        assert 'Role-playing (RPG), Indie' in html

    def test_edit_game(self, client, sample_games):
        """Test submitting the edit form updates the game and flashes"""
        hades = sample_games[0]
        form = {'name': 'Hades II', 'igdbId': str(hades.igdb_id), 'genres': 'Roguelike', 'platforms': ''}

        response = client.post(f'/games/{hades.id}/edit', data=form, follow_redirects=True)
        html = response.get_data(as_text=True)

        assert response.status_code == 200
        assert 'Hades II updated' in html
        assert 'Roguelike' in html

    def test_edit_conflict(self, client, sample_games):
        """Test taking another game's igdbId re-renders with the conflict"""
        hades, celeste = sample_games[0], sample_games[1]
        form = {'name': 'Hades', 'igdbId': str(celeste.igdb_id)}

        response = client.post(f'/games/{hades.id}/edit', data=form)

        assert response.status_code == 409
        assert 'already exists' in response.get_data(as_text=True)
