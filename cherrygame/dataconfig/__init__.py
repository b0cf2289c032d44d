"""Game tables loaded through a named parser from files or Redis, reloaded when they change."""