"""
WebSocket Package

Socket.IO handlers for live keyboard input.
"""
