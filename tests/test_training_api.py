import pytest

from training.models import TrainingPlaylist, TrainingProgress
from training.services import progress_summary

pytestmark = pytest.mark.django_db


@pytest.fixture
def menu_items(create_item):
    create_item(itemId='a', title='Steak', category='Food', subcategory='Mains')
    create_item(itemId='b', title='Burger', category='Food', subcategory='Mains')
    create_item(itemId='c', title='Lager', category='Drink', subcategory='Beer')


class TestPlaylist:
    def test_empty_playlist(self, staff_client, tenant):
        response = staff_client.get('/menu/demo/training/')

        assert response.status_code == 200
        assert response.data == {'itemIds': [], 'items': []}

    def test_replace_dedupes_and_drops_unknown_ids(self, admin_client, menu_items):
        response = admin_client.put('/menu/demo/training/', {
            'itemIds': ['c', 'a', 'c', 'ghost'],
        }, format='json')

        assert response.status_code == 200
        assert response.data['itemIds'] == ['c', 'a']
        assert [item['title'] for item in response.data['items']] == ['Lager', 'Steak']

    def test_staff_cannot_replace(self, staff_client, menu_items):
        response = staff_client.put('/menu/demo/training/', {'itemIds': ['a']}, format='json')

        assert response.status_code == 403

    def test_save_training_item_adds_to_playlist(self, admin_client, tenant):
        response = admin_client.post('/menu/demo/training/items/', {
            'title': 'Old Fashioned',
            'category': 'Drink',
            'subcategory': 'Whiskey',
            'description': 'Stir with ice, express orange peel.',
        }, format='json')

        assert response.status_code == 201
        item_id = response.data['item']['id']
        assert response.data['itemIds'] == [item_id]
        ordering = admin_client.get('/menu/demo/ordering/').data
        assert ordering['itemOrder']['drink::whiskey'] == [item_id]

    def test_deleting_item_prunes_playlist(self, admin_client, menu_items):
        admin_client.put('/menu/demo/training/', {'itemIds': ['a', 'b']}, format='json')

        admin_client.delete('/menu/demo/items/a/')

        assert TrainingPlaylist.objects.get(tenant__tenant_code='demo').item_ids == ['b']
        assert admin_client.get('/menu/demo/training/').data['itemIds'] == ['b']


class TestProgress:
    def test_toggle_and_percent(self, admin_client, staff_client, menu_items):
        admin_client.put('/menu/demo/training/', {'itemIds': ['a', 'b', 'c']}, format='json')

        response = staff_client.post('/menu/demo/training/progress/a/toggle/')

        assert response.status_code == 200
        assert response.data['completed'] == {'a': True}
        assert response.data['completedCount'] == 1
        assert response.data['total'] == 3
        assert response.data['percent'] == 33

        response = staff_client.post('/menu/demo/training/progress/a/toggle/')
        assert response.data['completed'] == {}
        assert response.data['percent'] == 0

    def test_progress_is_per_user(self, admin_client, staff_client, menu_items):
        admin_client.put('/menu/demo/training/', {'itemIds': ['a', 'b']}, format='json')
        staff_client.post('/menu/demo/training/progress/a/toggle/')

        assert admin_client.get('/menu/demo/training/progress/').data['completedCount'] == 0
        assert staff_client.get('/menu/demo/training/progress/').data['percent'] == 50

    def test_toggle_item_not_on_playlist(self, staff_client, menu_items):
        response = staff_client.post('/menu/demo/training/progress/a/toggle/')

        assert response.status_code == 404
        assert response.data['message'] == 'Item is not on the training playlist'

    def test_replace_progress_ignores_unknown_items(self, admin_client, staff_client, menu_items):
        admin_client.put('/menu/demo/training/', {'itemIds': ['a', 'b']}, format='json')

        response = staff_client.put('/menu/demo/training/progress/', {
            'completed': {'a': True, 'b': False, 'ghost': True},
        }, format='json')

        assert response.status_code == 200
        assert response.data['completed'] == {'a': True}
        assert response.data['percent'] == 50

    def test_progress_pruned_when_item_leaves_playlist(self, admin_client, staff_client, staff_user, menu_items):
        admin_client.put('/menu/demo/training/', {'itemIds': ['a', 'b']}, format='json')
        staff_client.post('/menu/demo/training/progress/a/toggle/')

        admin_client.put('/menu/demo/training/', {'itemIds': ['b']}, format='json')
        response = staff_client.get('/menu/demo/training/progress/')

        assert response.data == {'completed': {}, 'completedCount': 0, 'total': 1, 'percent': 0}
        assert TrainingProgress.objects.get(user=staff_user).completed == {}


class TestProgressSummary:
    def test_rounds_half_up(self):
        assert progress_summary({'a': True}, ['a', 'b', 'c'])['percent'] == 33
        assert progress_summary({'a': True, 'b': True}, ['a', 'b', 'c'])['percent'] == 67
        assert progress_summary({'a': True}, ['a', 'b'])['percent'] == 50

    def test_empty_playlist(self):
        assert progress_summary({}, []) == {'completed': {}, 'completedCount': 0, 'total': 0, 'percent': 0}
