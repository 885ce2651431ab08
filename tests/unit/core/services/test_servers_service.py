import pytest

from hetznerkit.core.services.servers import ServersApi


@pytest.fixture
def servers_api(mock_transport):
    return ServersApi(mock_transport)


@pytest.mark.asyncio
async def test_get_unwraps_server(servers_api, mock_transport):
    mock_transport.get.return_value = {"server": {"id": 42, "name": "web-1"}}

    server = await servers_api.get(42)

    assert server == {"id": 42, "name": "web-1"}
    mock_transport.get.assert_awaited_once_with("/servers/42")


@pytest.mark.asyncio
async def test_list_returns_raw_page(servers_api, mock_transport, page_factory):
    page = page_factory("servers", [{"id": 1}], 1, 4)
    mock_transport.get.return_value = page

    result = await servers_api.list({"status": "running"})

    assert result is page
    mock_transport.get.assert_awaited_once_with("/servers", {"status": "running"})


@pytest.mark.asyncio
async def test_list_all_walks_every_page(servers_api, mock_transport, page_factory):
    mock_transport.get.side_effect = [
        page_factory("servers", [{"id": 1}], 1, 2),
        page_factory("servers", [{"id": 2}], 2, 2),
    ]

    servers = await servers_api.list_all({"label_selector": "env=prod"})

    assert [s["id"] for s in servers] == [1, 2]
    assert mock_transport.get.call_args_list[1].args == ("/servers", {"label_selector": "env=prod", "page": 2})


@pytest.mark.asyncio
async def test_iterate_yields_items(servers_api, mock_transport, page_factory):
    mock_transport.get.side_effect = [page_factory("servers", [{"id": 7}, {"id": 8}], 1, 1)]

    ids = [server["id"] async for server in servers_api.iterate()]

    assert ids == [7, 8]


@pytest.mark.asyncio
async def test_create_returns_full_response(servers_api, mock_transport):
    response = {"server": {"id": 1}, "action": {"id": 10}, "next_actions": [], "root_password": "secret"}
    mock_transport.post.return_value = response
    params = {"name": "web-1", "server_type": "cx22", "image": "ubuntu-24.04"}

    result = await servers_api.create(params)

    assert result == response
    mock_transport.post.assert_awaited_once_with("/servers", params)


@pytest.mark.asyncio
async def test_update_and_delete(servers_api, mock_transport):
    mock_transport.put.return_value = {"server": {"id": 1, "name": "renamed"}}
    mock_transport.delete.return_value = {"action": {"id": 99, "command": "delete_server"}}

    updated = await servers_api.update(1, {"name": "renamed"})
    action = await servers_api.delete(1)

    assert updated["name"] == "renamed"
    assert action["id"] == 99
    mock_transport.put.assert_awaited_once_with("/servers/1", {"name": "renamed"})
    mock_transport.delete.assert_awaited_once_with("/servers/1")


@pytest.mark.asyncio
async def test_get_by_name(servers_api, mock_transport):
    mock_transport.get.return_value = {"servers": [{"id": 3, "name": "db"}]}
    assert (await servers_api.get_by_name("db"))["id"] == 3
    mock_transport.get.assert_awaited_once_with("/servers", {"name": "db"})

    mock_transport.get.return_value = {"servers": []}
    assert await servers_api.get_by_name("missing") is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "method, command",
    [
        ("power_on", "poweron"),
        ("power_off", "poweroff"),
        ("reboot", "reboot"),
        ("reset", "reset"),
        ("shutdown", "shutdown"),
        ("disable_rescue", "disable_rescue"),
        ("detach_iso", "detach_iso"),
        ("enable_backup", "enable_backup"),
        ("disable_backup", "disable_backup"),
    ],
)
async def test_bodyless_server_actions(servers_api, mock_transport, method, command):
    mock_transport.post.return_value = {"action": {"id": 5, "command": command}}

    action = await getattr(servers_api, method)(12)

    assert action["command"] == command
    mock_transport.post.assert_awaited_once_with(f"/servers/12/actions/{command}", None)


@pytest.mark.asyncio
async def test_server_actions_with_bodies(servers_api, mock_transport):
    mock_transport.post.return_value = {"action": {"id": 1}}

    await servers_api.change_type(1, "cx32", upgrade_disk=True)
    await servers_api.attach_iso(1, "virtio-win")
    await servers_api.change_protection(1, delete=True)
    await servers_api.change_dns_ptr(1, "1.2.3.4", None)
    await servers_api.attach_to_network(1, 4, ip="10.0.0.2")
    await servers_api.detach_from_network(1, 4)
    await servers_api.change_alias_ips(1, 4, ["10.0.0.3"])

    bodies = [c.args for c in mock_transport.post.await_args_list]
    assert bodies == [
        ("/servers/1/actions/change_type", {"server_type": "cx32", "upgrade_disk": True}),
        ("/servers/1/actions/attach_iso", {"iso": "virtio-win"}),
        ("/servers/1/actions/change_protection", {"delete": True}),
        ("/servers/1/actions/change_dns_ptr", {"ip": "1.2.3.4", "dns_ptr": None}),
        ("/servers/1/actions/attach_to_network", {"network": 4, "ip": "10.0.0.2"}),
        ("/servers/1/actions/detach_from_network", {"network": 4}),
        ("/servers/1/actions/change_alias_ips", {"network": 4, "alias_ips": ["10.0.0.3"]}),
    ]


@pytest.mark.asyncio
async def test_rescue_image_and_rebuild_return_full_responses(servers_api, mock_transport):
    mock_transport.post.side_effect = [
        {"action": {"id": 1}, "root_password": "pw"},
        {"action": {"id": 2}, "image": {"id": 77}},
        {"action": {"id": 3}, "root_password": "pw2"},
    ]

    rescue = await servers_api.enable_rescue(1, rescue_type="linux64", ssh_keys=[9])
    image = await servers_api.create_image(1, description="nightly", image_type="snapshot")
    rebuild = await servers_api.rebuild(1, "ubuntu-24.04")

    assert rescue["root_password"] == "pw"
    assert image["image"]["id"] == 77
    assert rebuild["action"]["id"] == 3
    assert mock_transport.post.await_args_list[0].args == (
        "/servers/1/actions/enable_rescue", {"type": "linux64", "ssh_keys": [9]}
    )
    assert mock_transport.post.await_args_list[1].args == (
        "/servers/1/actions/create_image", {"description": "nightly", "type": "snapshot"}
    )


@pytest.mark.asyncio
async def test_get_metrics_passes_query(servers_api, mock_transport):
    mock_transport.get.return_value = {"metrics": {"step": 60}}

    await servers_api.get_metrics(1, "cpu", "2026-01-01T00:00:00Z", "2026-01-01T01:00:00Z")

    mock_transport.get.assert_awaited_once_with(
        "/servers/1/metrics",
        {"type": "cpu", "start": "2026-01-01T00:00:00Z", "end": "2026-01-01T01:00:00Z"},
    )
