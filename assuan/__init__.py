"""Line framing and escaping for the Assuan IPC protocol."""

__version__ = "0.1.0"
