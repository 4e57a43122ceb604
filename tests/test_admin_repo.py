import vahub.repos.admin_repo as ar


class _Query:
    def __init__(self, value):
        self.value = value

    def filter(self, *args, **kwargs):
        return self

    def scalar(self):
        return self.value


class _DB:
    def __init__(self):
        self.values = iter([10, 4, 50, 7, 40, 30, 3, None])

    def query(self, *args, **kwargs):
        return _Query(next(self.values))


def test_get_stats_returns_expected_shape():
    out = ar.get_stats(_DB())
    assert out == {
        "totalVAs": 10,
        "totalEmployers": 4,
        "totalJobs": 50,
        "pendingJobs": 7,
        "approvedJobs": 40,
        "totalApplications": 30,
        "activeSubscriptions": 3,
        "pendingReports": 0,
    }


def test_get_stats_on_real_database(db, make_user, make_job):
    make_user()
    make_job()
    stats = ar.get_stats(db)
    assert stats["totalVAs"] == 1
    assert stats["totalEmployers"] == 1
    assert stats["totalJobs"] == 1
    assert stats["pendingJobs"] == 1
