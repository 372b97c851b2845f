import os
import logging
import tempfile

from ._misc import dump, dumps, load, loads, enable_logging


def test_dump_load():
    with tempfile.TemporaryDirectory() as d:
        a = [13]
        b = {'a': a}

        # references preserved
        dump((a, b), os.path.join(d, 'ab.pkl.lz4'))
        a_new, b_new = load(os.path.join(d, 'ab.pkl.lz4'))
        b_new['a'].append(7)
        assert b_new['a'] == [13, 7]
        assert a_new == [13, 7]

        # references not preserved
        dump(a, os.path.join(d, 'a.pkl.lz4'))
        dump(b, os.path.join(d, 'b.pkl.lz4'))
        a_new = load(os.path.join(d, 'a.pkl.lz4'))
        b_new = load(os.path.join(d, 'b.pkl.lz4'))
        b_new['a'].append(7)
        assert b_new['a'] == [13, 7]
        assert a_new == [13]


def test_dumps_loads_lambda():
    f = lambda theta, s, a: 13 * theta[0] + s  # noqa: E731
    f_new = loads(dumps(f))
    assert f_new([2.], 1, None) == f([2.], 1, None) == 27


def test_enable_logging_file_handler():
    with tempfile.TemporaryDirectory() as d:
        filepath = os.path.join(d, 'logs', 'ktd.log')
        root = logging.getLogger('')
        handlers_before = list(root.handlers)
        try:
            enable_logging('test', output_filepath=filepath, output_level=logging.WARNING)
            assert os.path.isdir(os.path.dirname(filepath))
            new_handlers = [h for h in root.handlers if h not in handlers_before]
            file_handlers = [h for h in new_handlers if isinstance(h, logging.FileHandler)]
            assert len(file_handlers) == 1
            assert file_handlers[0].level == logging.WARNING
        finally:
            for h in root.handlers:
                if h not in handlers_before:
                    root.removeHandler(h)
                    h.close()
