from __future__ import annotations

import dataclasses

import pytest

from substation.request import Request, Response


def test_request_keeps_env_and_input_identity():
    env, data = object(), {"id": 1}
    request = Request(env=env, input=data)
    assert request.env is env
    assert request.input is data


def test_request_is_immutable():
    request = Request(env=None, input=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.input = 2  # type: ignore[misc]


def test_success_points_back_at_request():
    request = Request(env="env", input="in")
    response = request.success("out")
    assert response.request is request
    assert response.output == "out"
    assert response.success is True


def test_error_builds_failure():
    request = Request(env="env", input="in")
    response = request.error({"reason": "nope"})
    assert response.request is request
    assert response.output == {"reason": "nope"}
    assert response.success is False


def test_response_delegates_env_and_input():
    env, data = object(), object()
    response = Request(env=env, input=data).success(None)
    assert response.env is env
    assert response.input is data


def test_response_variant_cannot_change():
    response = Request(env=None, input=None).success(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        response.success = False  # type: ignore[misc]


def test_responses_compare_by_value():
    request = Request(env="e", input="i")
    assert request.success(1) == Response(request=request, output=1, success=True)
    assert request.success(1) != request.error(1)
