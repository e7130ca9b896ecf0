"""Core configuration, errors, logging and validation"""
