from streamable.middleware.streamable_file import StreamableFileMiddleware
