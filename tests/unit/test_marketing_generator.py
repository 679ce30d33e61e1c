from __future__ import annotations

import pytest

from bionic.ai.errors import TRANSPORT_FAILURE, GenerationError
from bionic.application.marketing import MarketingGenerator
from bionic.domain.enums import WorkflowStatus
from tests.helpers.fake_gateway import FakeGateway, marketing_content, room_analysis


@pytest.fixture()
def generator(fake_gateway: FakeGateway) -> MarketingGenerator:
    return MarketingGenerator(fake_gateway, max_image_bytes=1024)


@pytest.mark.asyncio
@pytest.mark.parametrize("notes", ["", "   ", "\t\n"])
async def test_blank_notes_is_noop(generator, fake_gateway, notes):
    result = await generator.generate(notes)

    assert result.status == WorkflowStatus.SKIPPED
    assert fake_gateway.marketing_calls == []
    assert generator.content is None
    assert generator.copy_error is None


@pytest.mark.asyncio
async def test_generate_replaces_content(generator, fake_gateway):
    first = marketing_content()
    second = marketing_content(professionalListing="Second listing")
    fake_gateway.marketing_replies.extend([first, second])

    await generator.generate("first notes")
    result = await generator.generate("second notes")

    assert result.ok
    assert generator.content == second
    assert len(generator.content.flyer_points) == 3


@pytest.mark.asyncio
async def test_failure_keeps_previous_content_and_exposes_error(generator, fake_gateway):
    previous = marketing_content()
    fake_gateway.marketing_replies.extend(
        [previous, GenerationError("marketing_copy", TRANSPORT_FAILURE)]
    )

    await generator.generate("notes")
    result = await generator.generate("more notes")

    assert result.status == WorkflowStatus.FAILED
    assert generator.content == previous
    assert generator.copy_error == "generation_failed"
    assert generator.is_generating is False


@pytest.mark.asyncio
async def test_success_clears_previous_error(generator, fake_gateway):
    fake_gateway.marketing_replies.extend(
        [GenerationError("marketing_copy", TRANSPORT_FAILURE), marketing_content()]
    )

    await generator.generate("notes")
    await generator.generate("notes")

    assert generator.copy_error is None


def test_select_image_validates_input(generator):
    with pytest.raises(ValueError):
        generator.select_image(b"", "image/png")
    with pytest.raises(ValueError):
        generator.select_image(b"data", "text/plain")
    with pytest.raises(ValueError):
        generator.select_image(b"x" * 2048, "image/jpeg")


@pytest.mark.asyncio
async def test_analyze_without_image_is_skipped(generator, fake_gateway):
    result = await generator.analyze_selected_image()

    assert result.status == WorkflowStatus.SKIPPED
    assert fake_gateway.image_calls == []


@pytest.mark.asyncio
async def test_analysis_is_bound_to_selected_image(generator, fake_gateway):
    fake_gateway.image_replies.append(room_analysis())
    image = generator.select_image(b"jpeg-bytes", "image/jpeg")

    result = await generator.analyze_selected_image()

    assert result.ok
    assert fake_gateway.image_calls == [(b"jpeg-bytes", "image/jpeg")]
    assert generator.current_analysis == room_analysis()
    assert generator.selected_image.image_id == image.image_id


@pytest.mark.asyncio
async def test_selecting_new_image_clears_analysis_immediately(generator, fake_gateway):
    fake_gateway.image_replies.append(room_analysis())
    generator.select_image(b"first", "image/png")
    await generator.analyze_selected_image()
    assert generator.current_analysis is not None

    generator.select_image(b"second", "image/png")

    assert generator.current_analysis is None


@pytest.mark.asyncio
async def test_result_for_replaced_image_is_discarded(generator, fake_gateway):
    fake_gateway.image_replies.append(room_analysis("Contemporary"))
    generator.select_image(b"first", "image/png")
    fake_gateway.before_image_reply = lambda: generator.select_image(b"second", "image/png")

    result = await generator.analyze_selected_image()

    assert result.status == WorkflowStatus.STALE
    assert generator.current_analysis is None
    assert generator.analysis_error is None


@pytest.mark.asyncio
async def test_analysis_failure_sets_error(generator, fake_gateway):
    fake_gateway.image_replies.append(GenerationError("room_analysis", TRANSPORT_FAILURE))
    generator.select_image(b"img", "image/webp")

    result = await generator.analyze_selected_image()

    assert result.status == WorkflowStatus.FAILED
    assert generator.analysis_error == "generation_failed"
    assert generator.current_analysis is None


@pytest.mark.asyncio
async def test_clear_image(generator, fake_gateway):
    fake_gateway.image_replies.append(room_analysis())
    generator.select_image(b"img", "image/png")
    await generator.analyze_selected_image()

    generator.clear_image()

    assert generator.selected_image is None
    assert generator.current_analysis is None
