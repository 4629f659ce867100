"""Services package: Qt-free filesystem access for the models."""
