"""End-to-end tests for the resource facades over a mock transport."""

from collections.abc import Callable
from typing import Any

import pytest

from adapters.client import CrmClient
from adapters.services import DepartmentsService
from core.domain.department import Department, DepartmentCreate, DepartmentUpdate
from core.domain.email import EmailBoxConnect, Letter, LetterCreate
from core.domain.filters import TaskListParams
from core.domain.pagination import Envelope, Paginated
from core.domain.task import Task, TaskCreate, TaskUpdate
from core.errors import HttpStatusError, ShapeMismatchError
from core.request import ApiResponse, ApiResult, HttpMethod, RequestDescriptor

from conftest import RecordingTransport, departments_page, json_responder

MakeClient = Callable[..., CrmClient]


class StubExecutor:
    """Records descriptors instead of sending them."""

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.descriptors: list[RequestDescriptor] = []

    async def execute(self, descriptor: RequestDescriptor) -> ApiResult[Any]:
        self.descriptors.append(descriptor)
        return ApiResponse(status_code=200, headers={}, data=self.data)


class TestDepartments:
    @pytest.mark.asyncio
    async def test_paginated_listing_preserves_meta(self, make_client: MakeClient) -> None:
        body = departments_page(page=2, per_page=10, total=35)
        transport = RecordingTransport(json_responder(200, body))

        async with make_client(transport) as crm:
            result = await crm.departments.get_departments(page=2, list_size=10)

        assert transport.last.method == "GET"
        assert transport.last.url.path == "/api/company/v1/departments"
        assert transport.last.url.query == b"page=2&list=10"
        assert isinstance(result.data, Paginated)
        assert result.data.meta.last_page == 4
        assert result.data.meta.current_page == 2
        assert len(result.data.data) == 10

    @pytest.mark.asyncio
    async def test_list_all_returns_flat_collection(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, [{"id": "1"}, {"id": "2", "active": False}]))

        async with make_client(transport) as crm:
            result = await crm.departments.get_departments(list_size="all", show="all")

        assert transport.last.url.query == b"list=all&show=all"
        assert isinstance(result.data, list)
        assert not hasattr(result.data, "meta")
        assert [d.active for d in result.data] == [True, False]

    @pytest.mark.asyncio
    async def test_page_size_twenty(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, departments_page(page=1, per_page=20, total=7)))

        async with make_client(transport) as crm:
            result = await crm.departments.get_departments(list_size=20)

        assert result.data.meta.per_page == 20
        assert len(result.data.data) <= 20

    @pytest.mark.asyncio
    async def test_flat_and_paginated_share_one_request_builder(self) -> None:
        executor = StubExecutor(data=[])
        service = DepartmentsService(executor)

        await service.get_departments(page=1, list_size="all")
        await service.get_departments(page=1, list_size=20)

        flat, paged = executor.descriptors
        assert (flat.method, flat.path_template, flat.body) == (paged.method, paged.path_template, paged.body)
        assert flat.query.list_size == "all"
        assert paged.query.list_size == 20

    @pytest.mark.asyncio
    async def test_add_users_patches_resolved_path(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"id": "42", "usersIds": ["u1", "u2"]}))

        async with make_client(transport) as crm:
            result = await crm.departments.add_users("42", ["u1", "u2"])

        assert transport.last.method == "PATCH"
        assert transport.last.url.path.endswith("departments/42/addUsers")
        assert transport.last_json() == ["u1", "u2"]
        assert isinstance(result.data, Department)
        assert result.data.users_ids == ["u1", "u2"]

    @pytest.mark.asyncio
    async def test_create_sends_camel_case_payload(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(201, {"id": "7", "name": "Sales"}))

        async with make_client(transport) as crm:
            result = await crm.departments.create_department(DepartmentCreate(name="Sales", head_id="u9"))

        assert transport.last.method == "POST"
        assert transport.last_json() == {"name": "Sales", "headId": "u9", "usersIds": []}
        assert result.data.name == "Sales"

    @pytest.mark.asyncio
    async def test_not_found_is_returned(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(404, {"error": "not found"}))

        async with make_client(transport) as crm:
            result = await crm.departments.get_department("missing")

        assert isinstance(result, HttpStatusError)
        assert result.status == 404
        assert result.body == {"error": "not found"}

    @pytest.mark.asyncio
    async def test_update_roles_is_deprecated(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"id": "1"}))

        async with make_client(transport) as crm:
            with pytest.warns(DeprecationWarning):
                await crm.departments.update_department_roles("1", ["admin"])

        assert transport.last.url.path.endswith("departments/1/updateRoles")

    @pytest.mark.asyncio
    async def test_strict_shapes_reject_mismatched_body(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, departments_page(page=1, per_page=10, total=3)))

        async with make_client(transport, strict_shapes=True) as crm:
            with pytest.raises(ShapeMismatchError):
                await crm.departments.get_departments(list_size="all")

    @pytest.mark.asyncio
    async def test_update_and_delete_department_paths(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"id": "5", "headId": "u2"}))

        async with make_client(transport) as crm:
            updated = await crm.departments.update_department("5", DepartmentUpdate(head_id="u2"))
            assert (transport.last.method, transport.last.url.path) == ("PATCH", "/api/company/v1/departments/5")
            assert transport.last_json() == {"headId": "u2"}
            assert updated.data.head_id == "u2"

            await crm.departments.delete_department("5")
            assert (transport.last.method, transport.last.url.path) == ("DELETE", "/api/company/v1/departments/5")
            assert transport.last.content == b""

    @pytest.mark.asyncio
    async def test_delete_users_patches_resolved_path(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"id": "42", "usersIds": []}))

        async with make_client(transport) as crm:
            result = await crm.departments.delete_users("42", ["u1"])

        assert transport.last.method == "PATCH"
        assert transport.last.url.path == "/api/company/v1/departments/42/deleteUsers"
        assert transport.last_json() == ["u1"]
        assert result.data.users_ids == []


class TestEmail:
    @pytest.mark.asyncio
    async def test_connect_wraps_payload_in_data(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"id": 3, "email": "a@b.io"}))

        async with make_client(transport) as crm:
            await crm.email.connect_email_box(EmailBoxConnect(email="a@b.io", password="pw", imap_port=993))

        assert transport.last.url.path == "/api/email/v1/emails"
        assert transport.last_json() == {"data": {"email": "a@b.io", "password": "pw", "imapPort": 993}}

    @pytest.mark.asyncio
    async def test_letters_by_folder_are_paginated(self, make_client: MakeClient) -> None:
        body = {
            "data": [{"id": 1, "subject": "Hi", "from": "x@y.io"}],
            "meta": {"currentPage": 1, "from": 1, "to": 1, "perPage": 25, "lastPage": 1, "total": 1},
        }
        transport = RecordingTransport(json_responder(200, body))

        async with make_client(transport) as crm:
            result = await crm.email.get_letters(7, page=1, list_size=25)

        assert transport.last.url.path == "/api/email/v1/letters/by_folder/7"
        assert transport.last.url.query == b"page=1&list=25"
        assert isinstance(result.data, Paginated)
        assert result.data.data[0].sender == "x@y.io"

    @pytest.mark.asyncio
    async def test_folders_and_single_letter_use_envelope(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"data": [{"id": 1, "name": "Inbox"}]}))

        async with make_client(transport) as crm:
            folders = await crm.email.get_folders()

        assert isinstance(folders.data, Envelope)
        assert folders.data.data[0].name == "Inbox"

        transport = RecordingTransport(json_responder(200, {"data": {"id": 5, "subject": "Re"}, "meta": {}}))
        async with make_client(transport) as crm:
            letter = await crm.email.get_letter(5)

        assert transport.last.url.path == "/api/email/v1/letters/5"
        assert isinstance(letter.data.data, Letter)

    @pytest.mark.asyncio
    async def test_create_and_remove_letter(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"id": 11}))

        async with make_client(transport) as crm:
            await crm.email.create_letter(2, LetterCreate(to=["a@b.io"], subject="Hello"))
            assert transport.last.method == "POST"
            assert transport.last.url.path == "/api/email/v1/letters/by_folder/2"
            assert transport.last_json()["to"] == ["a@b.io"]

            await crm.email.remove_letter(11)
            assert transport.last.method == "DELETE"
            assert transport.last.url.path == "/api/email/v1/letters/11"

    @pytest.mark.asyncio
    async def test_list_and_remove_email_boxes(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"data": [{"id": 3, "email": "a@b.io"}]}))

        async with make_client(transport) as crm:
            boxes = await crm.email.get_email_boxes()
            assert (transport.last.method, transport.last.url.path) == ("GET", "/api/email/v1/emails")
            assert isinstance(boxes.data, Envelope)
            assert boxes.data.data[0].email == "a@b.io"

            await crm.email.remove_email_box(3)
            assert (transport.last.method, transport.last.url.path) == ("DELETE", "/api/email/v1/emails/3")
            assert transport.last.content == b""


class TestTasks:
    @pytest.mark.asyncio
    async def test_filters_are_serialized_in_declared_order(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, []))

        async with make_client(transport) as crm:
            await crm.tasks.get_tasks(
                {"search": "q", "deadline": [100, None], "status": ["open", "new"], "list": "all"}
            )

        assert transport.last.url.query == b"list=all&status=open&status=new&deadline_from=100&search=q"

    @pytest.mark.asyncio
    async def test_list_all_tasks_forces_sentinel(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, [{"id": "t1"}]))

        async with make_client(transport) as crm:
            result = await crm.tasks.list_all_tasks(TaskListParams(list_size=50, priority=["high"]))

        assert transport.last.url.params.get("list") == "all"
        assert isinstance(result.data[0], Task)

    @pytest.mark.asyncio
    async def test_list_task_page_drops_sentinel(self, make_client: MakeClient) -> None:
        body = {
            "data": [{"id": "t1"}],
            "meta": {"currentPage": 1, "from": 1, "to": 1, "perPage": 15, "lastPage": 1, "total": 1},
        }
        transport = RecordingTransport(json_responder(200, body))

        async with make_client(transport) as crm:
            result = await crm.tasks.list_task_page({"list": "all", "page": 1})

        assert "list" not in transport.last.url.params
        assert result.data.meta.per_page == 15

    @pytest.mark.asyncio
    async def test_create_task_sends_wire_names(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(201, {"id": "t9", "title": "Write docs", "taskType": "task"}))

        async with make_client(transport) as crm:
            result = await crm.tasks.create_task(TaskCreate(title="Write docs", responsible_id="u1"))

        sent = transport.last_json()
        assert sent["title"] == "Write docs"
        assert sent["taskType"] == "task"
        assert sent["responsibleId"] == "u1"
        assert result.data.id == "t9"

    @pytest.mark.asyncio
    async def test_get_and_delete_task_paths(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"id": "t3"}))

        async with make_client(transport) as crm:
            await crm.tasks.get_task("t3")
            assert (transport.last.method, transport.last.url.path) == ("GET", "/api/task/v1/tasks/t3")
            await crm.tasks.delete_task("t3")
            assert (transport.last.method, transport.last.url.path) == ("DELETE", "/api/task/v1/tasks/t3")

    @pytest.mark.asyncio
    async def test_update_task_patches_changed_fields(self, make_client: MakeClient) -> None:
        transport = RecordingTransport(json_responder(200, {"id": "t3", "status": "closed"}))

        async with make_client(transport) as crm:
            result = await crm.tasks.update_task("t3", TaskUpdate(status="closed", responsible_id="u4"))

        assert (transport.last.method, transport.last.url.path) == ("PATCH", "/api/task/v1/tasks/t3")
        assert transport.last_json() == {"status": "closed", "responsibleId": "u4"}
        assert isinstance(result.data, Task)


def test_descriptor_defaults() -> None:
    descriptor = RequestDescriptor(HttpMethod.GET, "tasks")

    assert descriptor.url_params == {}
    assert descriptor.query is None
    assert descriptor.body is None
