"""Line-oriented output sinks for reports, help text and errors."""

from toyrobot.output.sinks import BufferSink, ConsoleSink, EchoSink, LineSink

__all__ = ["BufferSink", "ConsoleSink", "EchoSink", "LineSink"]
