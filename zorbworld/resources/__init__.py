"""Resource loading and caching, and Aseprite sprite maps."""