import pytest

from winix.pipeline import AsyncCommand, Pipeline, execute_pipeline


class Source(AsyncCommand):
    def __init__(self, text):
        self.text = text
        self.received = []

    async def execute(self, input):
        self.received.append(input)
        return self.text


class Lines(AsyncCommand):
    async def execute(self, input):
        return input.splitlines()


class Matching(AsyncCommand):
    def __init__(self, pattern):
        self.pattern = pattern

    async def execute(self, input):
        return [line for line in input if self.pattern in line]


class Failing(AsyncCommand):
    async def execute(self, input):
        raise OSError("cannot read")


class Recorder(AsyncCommand):
    def __init__(self):
        self.calls = 0

    async def execute(self, input):
        self.calls += 1
        return input


TEXT = "hello world\nthis is a test\nhello again\nbye world"


@pytest.mark.asyncio
async def test_pipeline_feeds_output_forward():
    pipeline = Pipeline(Source(TEXT), Lines())
    assert await pipeline.execute(None) == TEXT.splitlines()


@pytest.mark.asyncio
async def test_nested_pipeline_filters():
    pipeline = Pipeline(Pipeline(Source(TEXT), Lines()), Matching("hello"))
    assert await execute_pipeline(pipeline) == ["hello world", "hello again"]


@pytest.mark.asyncio
async def test_execute_pipeline_passes_no_input():
    source = Source(TEXT)
    result = await execute_pipeline(source)
    assert result == TEXT
    assert source.received == [None]


@pytest.mark.asyncio
async def test_error_in_first_stops_pipeline():
    recorder = Recorder()
    with pytest.raises(OSError, match="cannot read"):
        await execute_pipeline(Pipeline(Failing(), recorder))
    assert recorder.calls == 0


@pytest.mark.asyncio
async def test_error_in_second_propagates():
    with pytest.raises(OSError):
        await Pipeline(Source(TEXT), Failing()).execute(None)


def test_command_base_is_abstract():
    with pytest.raises(TypeError):
        AsyncCommand()