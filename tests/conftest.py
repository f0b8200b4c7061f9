import pytest
from rest_framework.test import APIClient

from authentication.models import CustomUser, Tenant, TenantUser


@pytest.fixture
def tenant(db):
    return Tenant.objects.create(name='Demo Bistro', tenant_code='demo')


@pytest.fixture
def other_tenant(db):
    return Tenant.objects.create(name='Other Bistro', tenant_code='other')


def make_member(tenant, email, role, password='Sup3r-Secret-Pass'):
    user = CustomUser.objects.create_user(
        email=email, password=password, first_name='Test', last_name=role.title()
    )
    TenantUser.objects.create(tenant=tenant, user=user, role=role)
    return user


@pytest.fixture
def admin_user(tenant):
    return make_member(tenant, 'admin@mentra.dev', TenantUser.ROLE_ADMIN)


@pytest.fixture
def staff_user(tenant):
    return make_member(tenant, 'staff@mentra.dev', TenantUser.ROLE_STAFF)


@pytest.fixture
def outsider(other_tenant):
    return make_member(other_tenant, 'outsider@mentra.dev', TenantUser.ROLE_ADMIN)


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def staff_client(staff_user):
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def outsider_client(outsider):
    client = APIClient()
    client.force_authenticate(user=outsider)
    return client


@pytest.fixture
def create_item(admin_client):
    def _create(**fields):
        payload = {'description': 'How to serve it.', **fields}
        response = admin_client.post('/menu/demo/', payload, format='json')
        assert response.status_code == 201, response.data
        return response.data['item']
    return _create
