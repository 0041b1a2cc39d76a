"""Configuration and logging shared across channelkit."""
