from __future__ import annotations

import asyncio

import pytest

from infomark import InfoMarkError, InfoMarkNotImplementedError

PENDING = [
    ('account', 'get_avatar', ('T',)),
    ('account', 'upload_avatar', ('T', b'png')),
    ('account', 'delete_avatar', ('T',)),
    ('account', 'get', ('T',)),
    ('account', 'create', (None,)),
    ('account', 'patch', ('T', {})),
    ('email', 'user_email', ('T', 1, None)),
    ('email', 'group_email', ('T', 1, 2, None)),
    ('email', 'course_email', ('T', 1, None)),
    ('users', 'list_users', ('T',)),
    ('users', 'update', ('T', 1, None)),
    ('users', 'delete', ('T', 1)),
    ('users', 'me', ('T',)),
    ('users', 'update_me', ('T', None)),
    ('users', 'send_email', ('T', 1, None)),
    ('users', 'avatar', ('T', 1)),
    ('users', 'find', ('T', 'jane')),
    ('courses', 'points', ('T', 1)),
    ('courses', 'list_courses', ('T',)),
    ('courses', 'get', ('T', 1)),
    ('courses', 'create', ('T', None)),
    ('courses', 'update', ('T', 1, None)),
    ('courses', 'delete', ('T', 1)),
    ('sheets', 'list_sheets', ('T', 1)),
    ('sheets', 'get', ('T', 1, 2)),
    ('sheets', 'create', ('T', 1, None)),
    ('sheets', 'update', ('T', 1, 2, None)),
    ('sheets', 'delete', ('T', 1, 2)),
    ('sheets', 'points', ('T', 1, 2)),
    ('sheets', 'get_file', ('T', 1, 2)),
    ('sheets', 'upload_file', ('T', 1, 2, b'zip')),
    ('tasks', 'get_rating', ('T', 1, 2)),
    ('tasks', 'rate', ('T', 1, 2, 5)),
    ('tasks', 'get_public_file', ('T', 1, 2)),
    ('tasks', 'upload_public_file', ('T', 1, 2, b'zip')),
    ('tasks', 'get_private_file', ('T', 1, 2)),
    ('tasks', 'upload_private_file', ('T', 1, 2, b'zip')),
    ('tasks', 'get', ('T', 1, 2)),
    ('tasks', 'update', ('T', 1, 2, None)),
    ('tasks', 'delete', ('T', 1, 2)),
    ('tasks', 'missing', ('T', 1)),
    ('tasks', 'result', ('T', 1, 2)),
    ('tasks', 'sheet_tasks', ('T', 1, 2)),
    ('tasks', 'create_sheet_task', ('T', 1, 2, None)),
    ('submissions', 'list_submissions', ('T', 1)),
    ('submissions', 'group_task', ('T', 1, 2, 3)),
    ('submissions', 'group_task_file', ('T', 1, 2, 3)),
    ('submissions', 'file', ('T', 1, 2)),
    ('submissions', 'get', ('T', 1, 2)),
    ('submissions', 'upload', ('T', 1, 2, b'zip')),
    ('grades', 'summary', ('T', 1, 2)),
    ('grades', 'missing', ('T', 1)),
    ('grades', 'get', ('T', 1, 2)),
    ('grades', 'update', ('T', 1, 2, None)),
    ('groups', 'enroll', ('T', 1, 2, 3)),
    ('groups', 'list_groups', ('T', 1)),
    ('groups', 'create', ('T', 1, None)),
    ('groups', 'update', ('T', 1, 2, None)),
    ('groups', 'delete', ('T', 1, 2)),
    ('groups', 'bid', ('T', 1, 2, 7)),
    ('groups', 'own', ('T', 1)),
    ('enrollments', 'group_enrollments', ('T', 1, 2)),
    ('enrollments', 'list_enrollments', ('T', 1)),
    ('enrollments', 'update', ('T', 1, 2, None)),
    ('enrollments', 'create', ('T', 1, {})),
    ('enrollments', 'delete', ('T', 1, 2)),
    ('materials', 'get_file', ('T', 1, 2)),
    ('materials', 'upload_file', ('T', 1, 2, b'pdf')),
    ('materials', 'list_materials', ('T', 1)),
    ('materials', 'update', ('T', 1, 2, None)),
    ('materials', 'delete', ('T', 1, 2)),
    ('internal', 'public_result', ('T', 1, 2)),
    ('internal', 'private_result', ('T', 1, 2)),
    ('exams', 'list_exams', ('T', 1)),
    ('exams', 'create', ('T', 1, None)),
    ('exams', 'update', ('T', 1, 2, None)),
    ('exams', 'delete', ('T', 1, 2)),
    ('exams', 'enrollments', ('T', 1, 2)),
    ('exams', 'enroll', ('T', 1, 2)),
    ('exams', 'update_enrollment', ('T', 1, 2, None)),
    ('exams', 'unenroll', ('T', 1, 2)),
]


@pytest.mark.parametrize(('facade', 'method', 'args'), PENDING, ids=[f'{facade}.{method}' for facade, method, _ in PENDING])
def test_pending_endpoints_fail_loudly(make_client, facade, method, args) -> None:
    async def scenario() -> None:
        client, calls = make_client()
        async with client:
            operation = getattr(getattr(client, facade), method)
            with pytest.raises(InfoMarkNotImplementedError) as exc_info:
                await operation(*args)

        assert exc_info.value.endpoint == f'{facade}.{method}'
        assert calls == []

    asyncio.run(scenario())


def test_not_implemented_error_kinds() -> None:
    error = InfoMarkNotImplementedError('grades.summary')

    assert isinstance(error, InfoMarkError)
    assert isinstance(error, NotImplementedError)
    assert 'grades.summary' in str(error)
